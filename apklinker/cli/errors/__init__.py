from .error_handler import cli_apklinker_error_handler

__all__ = ["cli_apklinker_error_handler"]
