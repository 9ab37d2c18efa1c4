"""Errors raised by the configuration aggregator."""

from __future__ import annotations


class ConfigError(RuntimeError):
    def __init__(self, message: str, *, error_code: str) -> None:
        super().__init__(message)
        self.error_code = error_code


class ConfigDirectoryNotFound(ConfigError):
    def __init__(self, config_dir: str) -> None:
        super().__init__(
            f"Configuration directory not found: {config_dir}",
            error_code="config_dir_not_found",
        )
        self.config_dir = config_dir


class ConfigParseFailure(ConfigError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(
            f"Failed to parse configuration: {cause}",
            error_code="config_parse_failure",
        )
