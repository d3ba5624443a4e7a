"""
Output writer: puts the generated modules on disk.

Any previous version of each module is removed first so a stale file never
survives a failed write unnoticed.
"""

from pathlib import Path
from typing import Optional, Union

from .config import GeneratorConfig
from .exceptions import OutputWriteError
from .schemas import GeneratedSources
from .logger import get_module_logger

logger = get_module_logger("writer")


def _write(path: Path, text: str) -> None:
    try:
        if path.exists():
            path.unlink()
            logger.debug(f"Removed previous {path}")
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(
            message=f"Cannot write {path}: {e.strerror or e}",
            path=str(path),
        ) from e


def write_sources(
    sources: GeneratedSources,
    output_dir: Union[str, Path],
    config: Optional[GeneratorConfig] = None
) -> list[Path]:
    """
    Write both generated modules.

    Args:
        sources: Synthesizer output
        output_dir: Target directory, created if missing
        config: Supplies the module file names

    Returns:
        Paths written, types module first
    """
    config = config or GeneratorConfig()
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(
            message=f"Cannot create output directory {output_dir}: {e.strerror or e}",
            path=str(output_dir),
        ) from e

    written = []
    for filename, text in (
        (config.types_filename, sources.types_source),
        (config.operations_filename, sources.operations_source),
    ):
        path = output_dir / filename
        _write(path, text)
        logger.info(f"Wrote {len(text)} characters to {path}")
        written.append(path)

    return written
