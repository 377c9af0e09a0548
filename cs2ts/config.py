"""
Configuration loading for the cs2ts transpiler.

A config file is JSON:

    {
      "input": ["Models/**/*.cs"],
      "output": "types/generated.ts",
      "options": {
        "indentation": "  ",
        "addTimestamp": true,
        "exportInterfaces": true,
        "propertyNamingConvention": "preserve"
      }
    }

Missing options are filled from the defaults and unknown keys are ignored.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .codegen.context import GeneratorOptions, NamingConvention


DEFAULT_CONFIG_FILE = 'cs2ts.config.json'

_BOOLEAN_OPTIONS = ('addTimestamp', 'exportInterfaces')


class ConfigError(ValueError):
    """Raised when a config file is missing, malformed or invalid."""


@dataclass(frozen=True)
class TranspilerConfig:
    """Resolved configuration: input globs, output file and generator options."""
    input: List[str]
    output: str
    options: GeneratorOptions = field(default_factory=GeneratorOptions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'input': list(self.input),
            'output': self.output,
            'options': self.options.to_dict(),
        }


DEFAULT_CONFIG = TranspilerConfig(input=['**/*.cs'], output='generated.ts')


def load_config(config_path: str = DEFAULT_CONFIG_FILE) -> TranspilerConfig:
    """Load and validate a config file, merging options with defaults."""
    path = Path(config_path)
    if not path.is_file():
        raise ConfigError(f'Config file not found: {config_path}')

    try:
        with open(path, 'r', encoding='utf-8') as f:
            parsed = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ConfigError(f'Invalid JSON in config file: {config_path}')

    return validate_config(parsed)


def load_config_or_default(config_path: str = DEFAULT_CONFIG_FILE) -> TranspilerConfig:
    """Load a config file, or return DEFAULT_CONFIG if it does not exist.

    Invalid JSON and validation errors still raise.
    """
    if not Path(config_path).exists():
        return DEFAULT_CONFIG
    return load_config(config_path)


def validate_config(parsed: Any) -> TranspilerConfig:
    """Validate parsed JSON and build a TranspilerConfig."""
    if not isinstance(parsed, dict):
        raise ConfigError('Config must be a JSON object')

    # Validate input
    if 'input' not in parsed or parsed['input'] is None:
        raise ConfigError('Config must have "input" field')
    patterns = parsed['input']
    if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
        raise ConfigError('"input" must be an array of glob patterns')
    if not patterns:
        raise ConfigError('"input" array cannot be empty')

    # Validate output
    if not parsed.get('output'):
        raise ConfigError('Config must have "output" field')
    if not isinstance(parsed['output'], str):
        raise ConfigError('"output" must be a string')

    raw_options = parsed.get('options')
    if raw_options is None:
        raw_options = {}
    if not isinstance(raw_options, dict):
        raise ConfigError('"options" must be an object')
    _validate_options(raw_options)

    return TranspilerConfig(
        input=list(patterns),
        output=parsed['output'],
        options=GeneratorOptions.from_dict(raw_options),
    )


def _validate_options(raw_options: Dict[str, Any]) -> None:
    indentation = raw_options.get('indentation')
    if indentation is not None and not isinstance(indentation, str):
        raise ConfigError('"options.indentation" must be a string')

    for key in _BOOLEAN_OPTIONS:
        value = raw_options.get(key)
        if value is not None and not isinstance(value, bool):
            raise ConfigError(f'"options.{key}" must be a boolean')

    convention = raw_options.get('propertyNamingConvention')
    allowed = [c.value for c in NamingConvention]
    if convention is not None and convention not in allowed:
        raise ConfigError(
            f'"options.propertyNamingConvention" must be one of: {", ".join(allowed)}'
        )


def write_default_config(config_path: str = DEFAULT_CONFIG_FILE) -> Path:
    """Write DEFAULT_CONFIG as indented JSON. Refuses to overwrite."""
    path = Path(config_path)
    if path.exists():
        raise ConfigError(f'Config file already exists: {config_path}')
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(DEFAULT_CONFIG.to_dict(), f, indent=2)
        f.write('\n')
    return path
