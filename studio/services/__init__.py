from studio.services.storage import LocalStorage
from studio.services.project_manager import ProjectManager

__all__ = ["LocalStorage", "ProjectManager"]
