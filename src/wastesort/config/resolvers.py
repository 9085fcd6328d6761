# config/resolvers.py
from pathlib import Path
from typing import Iterable, Optional, Tuple, List
from platformdirs import user_cache_dir

APP = "wastesort"

def default_model_cache_dir() -> Path:
    """Per-user directory that holds downloaded model weights."""
    return Path(user_cache_dir(APP)) / "models"

def ensure_model_cache_dir(cache_dir: Optional[Path]) -> Path:
    p = Path(cache_dir) if cache_dir else default_model_cache_dir()
    p.mkdir(parents=True, exist_ok=True)
    return p

def resolve_image_inputs(
    *,
    files: Optional[Iterable[Path]] = None,
    directory: Optional[Path] = None,
    recursive: bool = False,
    extensions: Tuple[str, ...] = (".jpg", ".jpeg", ".png"),
) -> Tuple[str, ...]:
    """
    Collect image paths to classify.

    Explicit files are returned as given (resolved), even with an unknown
    extension, so the upload validator can reject them with a proper message.
    A directory is scanned for files matching ``extensions``.
    """
    if files and directory:
        raise ValueError("Specify either explicit input files or an input directory, not both.")

    if directory:
        base = Path(directory)
        if not base.is_dir():
            raise ValueError(f"--input-dir is not a directory: {base}")
        pattern = "**/*" if recursive else "*"
        found: List[Path] = []
        for p in base.glob(pattern):
            if p.is_file() and p.suffix.lower() in extensions:
                found.append(p.resolve())
        images = tuple(sorted({str(p) for p in found}))
        if not images:
            rec = " recursively" if recursive else ""
            exts = ", ".join(extensions)
            raise ValueError(f"No files with extensions ({exts}) found in {base}{rec}.")
        return images

    if files:
        # keep the caller's order, drop duplicates
        seen = {}
        for item in files:
            seen.setdefault(str(Path(item).expanduser().resolve()), None)
        return tuple(seen)

    raise ValueError("No inputs provided. Use --input or --input-dir.")
