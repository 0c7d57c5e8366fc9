# topmark:header:start
#
#   project      : Chromatag
#   file         : config_resolver.py
#   file_relpath : src/chromatag/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve Chromatag configuration from Click parameters.

Bridges CLI parsing and the configuration system: merges defaults, user and
project config files, explicit ``--config`` files and finally the CLI flags.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from chromatag.config import MutableConfig
from chromatag.config.keys import Toml
from chromatag.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chromatag.config.logging import ChromatagLogger
    from chromatag.config.types import Backend

logger: ChromatagLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    no_config: bool,
    config_paths: Iterable[str],
    backend: Backend | None = None,
    max_nesting_depth: int | None = None,
    strip_mode: bool | None = None,
    placeholders: bool | None = None,
    term: str | None = None,
) -> MutableConfig:
    """Build a `MutableConfig` from Click parameters.

    Resolution order (lowest to highest precedence):
      1. Runtime defaults.
      2. User config (``$XDG_CONFIG_HOME/chromatag/chromatag.toml``).
      3. ``pyproject.toml`` (``[tool.chromatag]``) then ``chromatag.toml`` in the
         working directory, unless ``--no-config`` is set.
      4. Explicit config files passed via ``--config``, merged in order.
      5. CLI overrides (flags), applied last.

    Args:
        no_config (bool): If True, skip user and project config discovery.
        config_paths (Iterable[str]): Extra config TOML file paths to merge.
        backend (Backend | None): ``--backend`` override.
        max_nesting_depth (int | None): ``--max-depth`` override.
        strip_mode (bool | None): ``--strip/--no-strip`` override.
        placeholders (bool | None): ``--placeholders/--no-placeholders`` override.
        term (str | None): ``--term`` override.

    Returns:
        MutableConfig: The merged draft, ready to freeze.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    draft.apply_args(
        {
            Toml.KEY_BACKEND: backend,
            Toml.KEY_MAX_NESTING_DEPTH: max_nesting_depth,
            Toml.KEY_STRIP_MODE: strip_mode,
            Toml.KEY_PLACEHOLDERS: placeholders,
            Toml.KEY_TERM: term,
        }
    )
    logger.debug("Resolved config: %s", draft)
    return draft
