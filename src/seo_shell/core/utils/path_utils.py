# src/seo_shell/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

EXPORT_SUFFIXES = (".csv", ".xlsx")


class PathUtils:
    """
    A central utility for reliably retrieving important package and user paths.
    """

    # --- Package specific paths ---

    @staticmethod
    def get_shell_package_root() -> Path:
        """
        Returns the absolute path of the seo_shell package (the directory holding settings.json).
        Resolved relative to this file, so it works for editable and regular installs alike.
        """
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_shell_package_root() / "settings.json"

    # --- User specific paths ---

    @staticmethod
    def get_user_documents_dir() -> Path:
        """
        Returns the absolute path to the current user's Documents directory.
        Default location for batch exports.
        """
        return Path.home() / "Documents"

    # --- Helper methods ---

    @staticmethod
    def resolve_output_path(output: str, default_suffix: str = ".xlsx") -> Path:
        """
        Resolves an export path: absolute paths are kept, relative paths land in Documents.
        A missing or unsupported suffix is replaced by default_suffix.
        """
        if default_suffix not in EXPORT_SUFFIXES:
            default_suffix = ".xlsx"
        path = Path(output).expanduser()
        if not path.is_absolute():
            path = PathUtils.get_user_documents_dir() / path
        if path.suffix.lower() not in EXPORT_SUFFIXES:
            logger.debug("Unsupported export suffix '%s', using %s", path.suffix, default_suffix)
            path = path.with_suffix(default_suffix)
        return path
