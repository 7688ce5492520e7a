"""ClosetIQ app bootstrap."""

import logging

from closet_app.config import AppConfig
from closet_app.logging_config import configure_logging, get_logger, log_event
from tools.closet_tools import ClosetTools
from tools.explanation import ExplanationProvider, build_explanation_provider


LOGGER = get_logger(__name__)


class ClosetIQApp:
    """Wires together configuration, logging, the explanation provider and tools."""

    def __init__(
        self,
        config: AppConfig | None = None,
        explanation_provider: ExplanationProvider | None = None,
    ) -> None:
        self.config = config or AppConfig.from_env()
        configure_logging(self.config.log_level)
        self.explanation_provider = explanation_provider or build_explanation_provider(
            self.config.explanation_backend,
            model=self.config.gemini_model,
            api_key=self.config.api_key,
        )
        self.closet_tools = ClosetTools(explanation_provider=self.explanation_provider)
        log_event(
            LOGGER,
            logging.INFO,
            "app_initialised",
            environment=self.config.environment or "local",
            explanation_backend=self.explanation_provider.name,
        )


__all__ = ["ClosetIQApp"]
