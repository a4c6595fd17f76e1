from eightpuzzle.utils.logging_utils import get_level_from_string, setup_logger

__all__ = ["get_level_from_string", "setup_logger"]
