import re
from abc import abstractmethod


class ApkLinkerError(Exception):
    """Parent for all wrapper errors, each one aborts linkage.

    CLI emits `repr` of an error to user and exits with `exit_code`.
    """

    # Most errors are misconfiguration of the wrapper by the build tool
    exit_code: int = 1

    @abstractmethod
    def __repr__(self) -> str:
        return f"Linkage aborted by an undocumented wrapper error ({super().__repr__()})"

    @property
    def generic_error_name(self) -> str:
        """Kebab-cased error class name, e.g `[missing-flag-value-error]`."""
        kebab_name = re.sub(r"(?<!^)(?=[A-Z])", "-", self.__class__.__name__).lower()
        return f"[{kebab_name}]"
