from utils.logger import logger
from utils.screenshot import take_screenshot
from utils.data_loader import load_json
from utils.report_viewer import open_report

__all__ = [
    "logger",
    "take_screenshot",
    "load_json",
    "open_report",
]
