from pathlib import Path
from typing import Optional


class TaskPaths:
    """
    Log path layout for onixkit.

    Standardized structure:
    - Global logs: logs/<name>.log
    - Project logs: <project_root>/logs/<name>.log
    """

    def __init__(self, logs_root: str = "logs", project_root: Optional[Path] = None):
        """
        Args:
            logs_root: Base logs directory name (default: "logs")
            project_root: If provided, logs live under this directory
        """
        if project_root:
            self.logs_root = Path(project_root) / logs_root
        else:
            self.logs_root = Path(logs_root)

    def get_log_path(self, name: str = "app") -> str:
        """
        Get the log file path for `name`, creating the parent directory.

        Args:
            name: Log file name (without .log extension)

        Returns:
            Full path to log file as string
        """
        p = self.logs_root / f"{name}.log"
        p.parent.mkdir(parents=True, exist_ok=True)
        return str(p)

    def get_module_log_path(self, module_name: str) -> str:
        """Log path for one onixkit area (e.g. "product", "config")."""
        return self.get_log_path(name=module_name)
