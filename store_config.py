# store_config.py
from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from cue_player import DEFAULT_CUE_SOUND


log = logging.getLogger(__name__)

APP_NAME = "volnote"

DEFAULT_CONFIG_TEXT = f"""\
[Commands]
pacmd = pacmd
pactl = pactl
amixer = amixer
paplay = paplay
mixer_device = pulse
mixer_control = Master

[Volume]
step = 5

[Cue]
sound = {DEFAULT_CUE_SOUND}
enabled = yes

[Notification]
timeout_ms = 2000
icon = audio-headphones
"""

_DEFAULTS = configparser.ConfigParser()
_DEFAULTS.read_string(DEFAULT_CONFIG_TEXT)


def _xdg_dir(var: str, fallback: Path) -> Path:
    v = os.environ.get(var)
    if v:
        return Path(v)
    return fallback


def user_config_dir(app_name: str = APP_NAME) -> Path:
    return _xdg_dir("XDG_CONFIG_HOME", Path.home() / ".config") / app_name


def user_state_dir(app_name: str = APP_NAME) -> Path:
    return _xdg_dir("XDG_STATE_HOME", Path.home() / ".local" / "state") / app_name


def user_runtime_dir(app_name: str = APP_NAME) -> Path:
    v = os.environ.get("XDG_RUNTIME_DIR")
    if v:
        return Path(v) / app_name
    return user_state_dir(app_name)


@dataclass(frozen=True)
class Settings:
    pacmd: str = "pacmd"
    pactl: str = "pactl"
    amixer: str = "amixer"
    paplay: str = "paplay"
    mixer_device: str = "pulse"
    mixer_control: str = "Master"
    step: int = 5
    cue_sound: str = DEFAULT_CUE_SOUND
    cue_enabled: bool = True
    timeout_ms: int = 2000
    icon: str = "audio-headphones"


def _get_int(cfg: configparser.ConfigParser, section: str, key: str) -> int:
    try:
        return cfg.getint(section, key)
    except ValueError:
        default = _DEFAULTS.getint(section, key)
        log.warning("Invalid [%s] %s in config, using %d.", section, key, default)
        return default


def _get_bool(cfg: configparser.ConfigParser, section: str, key: str) -> bool:
    try:
        return cfg.getboolean(section, key)
    except ValueError:
        default = _DEFAULTS.getboolean(section, key)
        log.warning("Invalid [%s] %s in config, using %s.", section, key, default)
        return default


@dataclass(frozen=True)
class ConfigStore:
    app_name: str = APP_NAME
    filename: str = "volnote.cfg"

    @property
    def dir_path(self) -> Path:
        return user_config_dir(self.app_name)

    @property
    def file_path(self) -> Path:
        return self.dir_path / self.filename

    def ensure_exists(self) -> None:
        self.dir_path.mkdir(parents=True, exist_ok=True)
        if not self.file_path.exists():
            self.file_path.write_text(DEFAULT_CONFIG_TEXT, encoding="utf-8")

    def load(self) -> configparser.ConfigParser:
        self.ensure_exists()
        cfg = configparser.ConfigParser()
        cfg.read(self.file_path, encoding="utf-8")

        for section in _DEFAULTS.sections():
            if not cfg.has_section(section):
                cfg.add_section(section)
            for key, value in _DEFAULTS.items(section):
                cfg.set(section, key, cfg.get(section, key, fallback=value))

        return cfg

    def settings(self) -> Settings:
        cfg = self.load()
        return Settings(
            pacmd=cfg.get("Commands", "pacmd").strip(),
            pactl=cfg.get("Commands", "pactl").strip(),
            amixer=cfg.get("Commands", "amixer").strip(),
            paplay=cfg.get("Commands", "paplay").strip(),
            mixer_device=cfg.get("Commands", "mixer_device").strip(),
            mixer_control=cfg.get("Commands", "mixer_control").strip(),
            step=_get_int(cfg, "Volume", "step"),
            cue_sound=cfg.get("Cue", "sound").strip(),
            cue_enabled=_get_bool(cfg, "Cue", "enabled"),
            timeout_ms=_get_int(cfg, "Notification", "timeout_ms"),
            icon=cfg.get("Notification", "icon").strip(),
        )


def load_settings(store: ConfigStore | None = None) -> Settings:
    return (store or ConfigStore()).settings()
