"""
測試資料載入器
從 test_data/ 載入 JSON 測試資料。

用法：
    from utils.data_loader import load_json

    steps = load_json("tutorial_dialogs.json")
"""

import json
from pathlib import Path

from core.exceptions import DataFileNotFoundError, TestDataError

DATA_DIR = Path(__file__).resolve().parent.parent / "test_data"


def load_json(filename: str, data_dir: Path | None = None) -> list[dict]:
    """從 JSON 檔載入測試資料，檔案內容必須是 list"""
    filepath = (data_dir or DATA_DIR) / filename
    if not filepath.exists():
        raise DataFileNotFoundError(str(filepath))
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise TestDataError(
            f"測試資料格式錯誤: {filepath} 應為 list，實際 {type(data).__name__}",
            context={"path": str(filepath)},
        )
    return data
