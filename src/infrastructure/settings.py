"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from src.infrastructure.logging.logger import get_app_logger

DEFAULT_NODE_URL = "https://fullnode.mainnet.sui.io:443"


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for talking to a Sui full node.

    Attributes:
        node_url: JSON-RPC endpoint of the full node.
        page_size: Owned objects requested per page.
        request_timeout: Per-request timeout in seconds.
        max_retries: Transport-level retries for idempotent calls.
        max_workers: Worker threads used to classify a page.
    """

    node_url: str = DEFAULT_NODE_URL
    page_size: int = 20
    request_timeout: float = 10.0
    max_retries: int = 3
    max_workers: int = 1

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        defaults = cls()
        node_url = os.getenv("SUI_NODE_URL", "").strip() or defaults.node_url
        return cls(
            node_url=node_url,
            page_size=cls._read_number(
                "SUI_PAGE_SIZE", defaults.page_size, int, logger
            ),
            request_timeout=cls._read_number(
                "SUI_REQUEST_TIMEOUT", defaults.request_timeout, float, logger
            ),
            max_retries=cls._read_number(
                "SUI_MAX_RETRIES", defaults.max_retries, int, logger, minimum=0
            ),
            max_workers=cls._read_number(
                "HISTORY_MAX_WORKERS", defaults.max_workers, int, logger
            ),
        )

    @staticmethod
    def _read_number(name: str, default, cast, logger, minimum=1):
        """Read a number from the environment.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            cast: Numeric type to convert to.
            logger: Logger used for warnings.
            minimum: Smallest accepted value.

        Returns:
            The parsed value, or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = cast(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value < minimum:
            logger.warning(f"{name} must be at least {minimum}; using {default}")
            return default
        return value


__all__ = ["DEFAULT_NODE_URL", "LedgerSettings"]
