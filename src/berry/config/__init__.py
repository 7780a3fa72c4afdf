from .loader import BerryConfig, load_config_from_path, find_project_root

__all__ = ["BerryConfig", "load_config_from_path", "find_project_root"]
