from __future__ import annotations

import logging
import os
import pathlib
import tomllib
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

# 起動時に読み込む設定ファイルのパスを指定する環境変数
CONFIG_ENV_VAR = "BUBBLE_VOCAB_CONFIG"


class _RuntimeStore:
    config: dict[str, Any] | None = None


_RUNTIME_STORE = _RuntimeStore()


def set_runtime_config(cfg: dict[str, Any] | None) -> None:
    """実行時（アップロード/起動時ファイル）で与えられた設定を保持する。None で解除。"""
    _RUNTIME_STORE.config = cfg if isinstance(cfg, dict) else None


def set_runtime_toml_bytes(data: bytes) -> bool:
    """TOML バイト列から実行時設定を反映する。解釈できなければ設定を解除して False を返す。"""
    try:
        cfg = tomllib.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Invalid config TOML ignored: {e}")
        set_runtime_config(None)
        return False
    set_runtime_config(cfg)
    return True


def load_config_from_env() -> bool:
    """環境変数で指定された TOML があれば読み込む。読み込めたら True。"""
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return False
    p = pathlib.Path(path)
    if not p.exists():
        logger.warning(f"Config file not found: {p}")
        return False
    return set_runtime_toml_bytes(p.read_bytes())


def _get_config() -> dict[str, Any]:
    """現在有効な設定を返す。

    方針: 既定ではローカルの TOML を探しに行かない。
    - 実行時設定があればそれを返す。
    - それ以外は空辞書を返し、各呼び出し側で default 値にフォールバックさせる。
    """
    if isinstance(_RUNTIME_STORE.config, dict):
        return _RUNTIME_STORE.config
    return {}


def get_app_title(default: str = "えいごバブル") -> str:
    cfg = _get_config()
    title = cfg.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    return default


def get_log_level(default: str = "INFO") -> str:
    cfg = _get_config()
    section = cfg.get("logging") or {}
    if isinstance(section, dict):
        v = section.get("level")
        if isinstance(v, str) and v.strip():
            return v.strip().upper()
    return default


def load_default_settings_values() -> dict[str, int | bool | str]:
    result: dict[str, int | bool | str] = {}
    cfg = _get_config()
    settings = cfg.get("settings")
    if isinstance(settings, dict):
        # 不正な型の場合は各呼び出し側でコード既定値へフォールバックする。
        for key in ("width", "height", "fps"):
            v = settings.get(key)
            if isinstance(v, int) and not isinstance(v, bool) and v > 0:
                result[key] = int(v)
        for key in ("muted", "speech_slow"):
            if isinstance(settings.get(key), bool):
                result[key] = bool(settings[key])
        lang = settings.get("speech_lang")
        if isinstance(lang, str) and lang.strip():
            result["speech_lang"] = lang.strip()
    return result


if TYPE_CHECKING:
    from src.bubble_vocab_trainer.app.state import Settings as _SettingsType


def load_default_settings() -> _SettingsType:
    from src.bubble_vocab_trainer.app.state import Settings  # 局所インポートで循環回避

    values = load_default_settings_values()
    return Settings(
        width=int(values.get("width", Settings.width)),
        height=int(values.get("height", Settings.height)),
        fps=int(values.get("fps", Settings.fps)),
        muted=bool(values.get("muted", Settings.muted)),
        speech_slow=bool(values.get("speech_slow", Settings.speech_slow)),
        speech_lang=str(values.get("speech_lang", Settings.speech_lang)),
    )
