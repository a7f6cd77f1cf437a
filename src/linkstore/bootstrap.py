"""Run the startup steps a BootstrapPolicy enables, in policy order."""

from typing import Callable, Dict, List, Mapping, Optional
from loguru import logger

from linkstore.database.base import StorageHandle
from linkstore.init_defaults import BootstrapPolicy
from linkstore.service.option import preload_options

Step = Callable[[], None]


class Bootstrapper:

    def __init__(self, policy: BootstrapPolicy, steps: Mapping[str, Step], fast_init: bool = False):
        unknown = set(steps) - set(policy.step_names())
        if unknown:
            raise ValueError(f"Unknown bootstrap step(s): {', '.join(sorted(unknown))}")
        self.policy = policy
        self.steps = dict(steps)
        self.fast_init = fast_init
        self.executed: List[str] = []

    def run(self) -> List[str]:
        """Execute enabled steps; return the names of the ones that ran."""
        for name, enabled in self.policy.steps():
            if not enabled:
                logger.debug("Bootstrap step {} disabled", name)
                continue

            if name == "return_if_fast_init" and self.fast_init:
                logger.info("Fast init requested, stopping bootstrap after {}", name)
                return self.executed

            step = self.steps.get(name)
            if step is None:
                logger.debug("Bootstrap step {} has no handler", name)
                continue

            logger.debug("Running bootstrap step {}", name)
            step()
            self.executed.append(name)
        return self.executed


def storage_steps(handle: StorageHandle, on_not_installed: Optional[Step] = None) -> Dict[str, Step]:
    """Step handlers for the storage side of bootstrap."""
    steps: Dict[str, Step] = {
        "include_db": handle.init,
        "get_all_options": lambda: preload_options(handle),
    }
    if on_not_installed is not None:
        def redirect_to_install():
            if not handle.is_installed():
                on_not_installed()
        steps["redirect_to_install"] = redirect_to_install
    return steps
