"""Default actions performed when the application starts.

Each flag gates one bootstrap step. Everything is on by default; test harnesses
build a policy with some steps turned off (e.g. network-dependent ones).
"""

from dataclasses import dataclass, fields, replace
from typing import Iterator, Tuple


@dataclass(frozen=True)
class BootstrapPolicy:
    # Load core function modules
    include_core_funcs: bool = True
    # Set default time zone
    default_timezone: bool = True
    # Load default text domain
    load_default_textdomain: bool = True
    # Check for maintenance mode and maybe stop here
    check_maintenance_mode: bool = True
    # Normalize the request URI
    fix_request_uri: bool = True
    # Redirect to SSL if needed
    redirect_ssl: bool = True
    # Connect to storage
    include_db: bool = True
    # Load the cache layer
    include_cache: bool = True
    # Stop early when fast init is requested
    return_if_fast_init: bool = True
    # Read all options at once
    get_all_options: bool = True
    # Register shutdown action
    register_shutdown: bool = True
    # Fire "init" once core is loaded
    core_loaded: bool = True
    # Redirect to install procedure if needed
    redirect_to_install: bool = True
    # Redirect to upgrade procedure if needed
    check_if_upgrade_needed: bool = True
    # Load all plugins
    load_plugins: bool = True
    # Fire "plugins_loaded"
    plugins_loaded_action: bool = True
    # Check if a new version is available
    check_new_version: bool = True
    # Fire "admin_init" if applicable
    init_admin: bool = True

    @classmethod
    def step_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def steps(self) -> Iterator[Tuple[str, bool]]:
        """Yield (step, enabled) pairs in bootstrap order."""
        for name in self.step_names():
            yield name, getattr(self, name)

    def without(self, *names: str) -> "BootstrapPolicy":
        """Return a copy with the given steps disabled."""
        known = set(self.step_names())
        unknown = [n for n in names if n not in known]
        if unknown:
            raise ValueError(f"Unknown bootstrap step(s): {', '.join(unknown)}")
        return replace(self, **{n: False for n in names})
