# src/seo_shell/core/context/shell_context.py
import logging
from typing import Optional

from seo_analyzer.config import AnalyzerConfig
from seo_analyzer.engine import SEOAnalyzer
from seo_shell.core.managers.config_manager import ConfigManager, config_manager

logger = logging.getLogger(__name__)


class ShellContext:
    """
    Carries the configuration into the command handlers and builds analyzers from it.
    """

    def __init__(self, manager: Optional[ConfigManager] = None):
        self.config_manager = manager or config_manager

    def get_analyzer_config(self, site_domain: Optional[str] = None) -> AnalyzerConfig:
        """
        Returns the analyzer config from settings, with site_domain overriding the configured one.
        """
        config = self.config_manager.get_analyzer_config()
        if site_domain:
            # model_validate, not model_copy, so the domain validator runs
            config = AnalyzerConfig.model_validate({**config.model_dump(), "site_domain": site_domain})
        return config

    def create_analyzer(self, site_domain: Optional[str] = None) -> SEOAnalyzer:
        config = self.get_analyzer_config(site_domain)
        logger.debug("Creating SEOAnalyzer (site_domain=%s)", config.site_domain)
        return SEOAnalyzer(config)

    def __repr__(self) -> str:
        return f"<ShellContext site_domain={self.config_manager.get_nested('analyzer.site_domain')!r}>"
