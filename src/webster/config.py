"""
config.py - Settings for the webster command line tool.

Settings come from built-in defaults, optionally overlaid by a YAML file
and the WEBSTER_CORPUS environment variable. Command line flags are
applied last by the CLI.

Example settings file:

    corpus: /data/gutenberg/29765-8.txt
    colors:
      headword: white
      description: green
    html:
      output: words.html
"""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from webster.errors import ConfigError
from webster.reader import CORPUS_ENCODING

logger = logging.getLogger(__name__)

CORPUS_ENV_VAR = "WEBSTER_CORPUS"

DEFAULT_COLORS = {
    'headword': 'white',
    'description': 'green',
}

DEFAULT_HTML = {
    'output': 'words.html',
    'title': "Webster's Unabridged Dictionary",
    'description': (
        "HTML version of Gutenberg's Webster's Unabridged Dictionary 29765-8.txt "
        "with character set encoding ISO-8859-1"
    ),
    'details': (
        "Title: Gutenberg's Webster's Unabridged Dictionary; Author: Various; "
        "Release date: August 22, 2009 [EBook #29765]; "
        "Last update date: December 24, 2018; Language: English; "
        "Character set encoding: ISO-8859-1; Produced by Graham Lawrence; "
        "HTML by Robert Jurjevic"
    ),
}


@dataclass
class Settings:
    corpus: Path = Path("29765-8.txt")
    encoding: str = CORPUS_ENCODING
    words_file: Path = Path("words.txt")
    headword_list: Path = Path("Webster.txt")
    colors: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLORS))
    html: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HTML))

    @property
    def html_output(self) -> Path:
        return Path(self.html['output'])


_PATH_KEYS = {'corpus', 'words_file', 'headword_list'}
_NESTED_KEYS = {'colors': DEFAULT_COLORS, 'html': DEFAULT_HTML}


def _apply(settings: Settings, data: Dict, source: str) -> Settings:
    known = {f.name for f in fields(Settings)}
    for key, value in data.items():
        if key not in known:
            raise ConfigError(f"{source}: unknown setting '{key}'")
        if key in _NESTED_KEYS:
            if not isinstance(value, dict):
                raise ConfigError(f"{source}: '{key}' must be a mapping")
            unknown = set(value) - set(_NESTED_KEYS[key])
            if unknown:
                raise ConfigError(f"{source}: unknown {key} setting(s): {sorted(unknown)}")
            merged = dict(getattr(settings, key))
            merged.update({k: str(v) for k, v in value.items()})
            setattr(settings, key, merged)
        elif key in _PATH_KEYS:
            setattr(settings, key, Path(value))
        else:
            setattr(settings, key, str(value))
    return settings


def load_settings(config_path: Optional[Union[str, Path]] = None, environ=None) -> Settings:
    """
    Build Settings from defaults, an optional YAML file and the environment.

    A missing config file is an error only when a path was given explicitly.
    """
    environ = os.environ if environ is None else environ
    settings = Settings()

    if config_path is not None:
        config_path = Path(config_path)
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"{config_path}: top level must be a mapping")
        _apply(settings, data, str(config_path))
        logger.debug(f"Loaded settings from {config_path}")

    corpus = environ.get(CORPUS_ENV_VAR)
    if corpus:
        settings.corpus = Path(corpus)

    return settings
