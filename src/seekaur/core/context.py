"""Application context with dependency injection."""

from dataclasses import dataclass

from seekaur.core.aur.abc import Aur
from seekaur.core.aur.real import RealAur
from seekaur.core.global_config import GlobalConfig, default_config_path, load_config


@dataclass(frozen=True)
class SeekaurContext:
    """Immutable context holding all dependencies for seekaur commands.

    Created at CLI entry point and threaded through the application.
    """

    aur: Aur
    config: GlobalConfig

    @staticmethod
    def for_test(
        aur: Aur | None = None,
        config: GlobalConfig | None = None,
    ) -> "SeekaurContext":
        """Create a context with test defaults.

        Args:
            aur: AUR integration, defaults to an empty FakeAur
            config: Config, defaults to GlobalConfig.default()
        """
        from seekaur.core.aur.fake import FakeAur

        return SeekaurContext(
            aur=aur if aur is not None else FakeAur(),
            config=config if config is not None else GlobalConfig.default(),
        )


def create_context() -> SeekaurContext:
    """Create production context with real implementations.

    Raises:
        ValueError: If the config file is malformed
    """
    config = load_config(default_config_path())
    return SeekaurContext(aur=RealAur(config.aur_url), config=config)
