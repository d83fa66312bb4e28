from __future__ import annotations

import logging
import os
import pathlib
import tomllib
from typing import TYPE_CHECKING, Any

from src.memorize.domain import BUILTIN_THEMES, DEFAULT_THEME

logger = logging.getLogger(__name__)

# 設定ファイルのパスを指定する環境変数
CONFIG_ENV_VAR = "MEMORIZE_CONFIG"


class _RuntimeStore:
    config: dict[str, Any] | None = None


_RUNTIME_STORE = _RuntimeStore()


def set_runtime_config(cfg: dict[str, Any] | None) -> None:
    """実行時に与えられた設定を保持する。None で解除。"""
    _RUNTIME_STORE.config = cfg if isinstance(cfg, dict) else None


def set_runtime_toml_bytes(data: bytes) -> bool:
    """TOML バイト列から実行時設定を反映する。読めなければ設定を解除して False を返す。"""
    try:
        cfg = tomllib.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("設定 TOML を読み込めませんでした: %s", e)
        set_runtime_config(None)
        return False
    set_runtime_config(cfg)
    return True


def load_config_file(path: str | pathlib.Path) -> bool:
    """ローカルの TOML ファイルを実行時設定として読み込む。"""
    p = pathlib.Path(path)
    try:
        data = p.read_bytes()
    except OSError as e:
        logger.warning("設定ファイルを開けませんでした: %s (%s)", p, e)
        return False
    return set_runtime_toml_bytes(data)


def load_config_from_env() -> bool:
    """環境変数 MEMORIZE_CONFIG が指すファイルを読み込む。未設定なら何もしない。"""
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return False
    return load_config_file(path)


def _get_config() -> dict[str, Any]:
    """現在有効な設定を返す。

    方針: 実行時設定が無ければ空辞書を返し、各呼び出し側で default 値にフォールバックさせる。
    """
    if isinstance(_RUNTIME_STORE.config, dict):
        return _RUNTIME_STORE.config
    return {}


def get_app_title(default: str = "Memorize!") -> str:
    cfg = _get_config()
    title = cfg.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    return default


def get_how_to_play_text(default: str = "") -> str:
    cfg = _get_config()
    pages = cfg.get("pages") or {}
    if isinstance(pages, dict):
        v = pages.get("how_to_play")
        if isinstance(v, str) and v.strip():
            return v.strip()
    return default


def _configured_themes() -> dict[str, tuple[str, ...]]:
    """設定ファイルの [themes.<name>] を読み、有効な絵柄リストだけを返す。"""
    themes = _get_config().get("themes")
    result: dict[str, tuple[str, ...]] = {}
    if not isinstance(themes, dict):
        return result
    for name, body in themes.items():
        emojis = body.get("emojis") if isinstance(body, dict) else None
        if isinstance(emojis, list) and emojis and all(isinstance(e, str) and e for e in emojis):
            result[str(name)] = tuple(emojis)
        else:
            logger.warning("テーマ %r の emojis が不正なため無視します", name)
    return result


def get_theme_names() -> list[str]:
    """組み込みテーマと設定ファイルのテーマ名（設定側が同名を上書き）。"""
    names = list(BUILTIN_THEMES)
    for name in _configured_themes():
        if name not in names:
            names.append(name)
    return names


def get_theme_emojis(name: str) -> tuple[str, ...]:
    """テーマ名から絵柄を返す。未知の名前なら既定テーマを返す。"""
    configured = _configured_themes()
    if name in configured:
        return configured[name]
    if name in BUILTIN_THEMES:
        return BUILTIN_THEMES[name]
    logger.warning("未知のテーマ %r のため %r を使用します", name, DEFAULT_THEME)
    return BUILTIN_THEMES[DEFAULT_THEME]


def load_default_settings_values() -> dict[str, int | float | str]:
    result: dict[str, int | float | str] = {}
    cfg = _get_config()
    settings = cfg.get("settings")
    if isinstance(settings, dict):
        # 不正な型・範囲の場合は各呼び出し側でコード既定値へフォールバックする。
        # bool は int のサブクラスなので除外する
        pairs = settings.get("pairs")
        if isinstance(pairs, int) and not isinstance(pairs, bool) and pairs >= 0:
            result["pairs"] = pairs
        limit = settings.get("bonus_time_limit")
        if isinstance(limit, (int, float)) and not isinstance(limit, bool) and limit >= 0:
            result["bonus_time_limit"] = float(limit)
        theme = settings.get("theme")
        if isinstance(theme, str) and theme.strip():
            result["theme"] = theme.strip()
    return result


if TYPE_CHECKING:
    from src.memorize.app.state import Settings as _SettingsType


def load_default_settings() -> _SettingsType:
    from src.memorize.app.state import Settings  # 局所インポートで循環回避

    values = load_default_settings_values()
    return Settings(
        pair_count=int(values.get("pairs", Settings.pair_count)),
        bonus_time_limit=float(values.get("bonus_time_limit", Settings.bonus_time_limit)),
        theme=str(values.get("theme", Settings.theme)),
    )
