from pathlib import Path
from typing import List, Optional


def get_project_root(marker_file: Optional[str] = None, marker_dirs: Optional[List[str]] = None,
                     start: Optional[Path] = None) -> Path:
    """
    Find project root by searching upward for marker files or directories.

    Args:
        marker_file: Optional filename to search for (e.g., 'pyproject.toml', '.git')
        marker_dirs: Optional list of directory names that indicate project root
        start: Directory to start from. Defaults to the directory of this module.

    Returns:
        Path to project root, defaults to current working directory if not found
    """
    current_path = Path(start).resolve() if start is not None else Path(__file__).resolve().parent

    if marker_file is None and marker_dirs is None:
        marker_file = "pyproject.toml"

    for _ in range(10):  # Limit upward traversal
        if marker_file and (current_path / marker_file).exists():
            return current_path

        if marker_dirs and all((current_path / d).exists() for d in marker_dirs):
            return current_path

        parent = current_path.parent
        if parent == current_path:  # Reached filesystem root
            break
        current_path = parent

    return Path.cwd()
