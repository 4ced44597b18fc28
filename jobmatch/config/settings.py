"""Layered configuration for JobMatch.

Precedence, lowest to highest:
  1. built-in defaults
  2. ~/.jobmatch/config.yaml
  3. ./jobmatch.yaml
  4. an explicit file (``--config``)
  5. environment variables, ``JOBMATCH_MATCHING__BONUS_PER_SKILL=3`` sets
     ``matching.bonus_per_skill``
"""
from __future__ import annotations
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from jsonschema import ValidationError as SchemaValidationError
from jsonschema import validate as js_validate
from pydantic import BaseModel, Field, ValidationError, field_validator

from jobmatch import JobMatchError
from jobmatch.matching.pipeline import MatchingConfig
from jobmatch.nlp.extractors import DEFAULT_VOCABULARY

ENV_PREFIX = 'JOBMATCH_'
SCHEMA_PATH = Path(__file__).with_name('schema.json')

DEFAULTS: Dict[str, Any] = {
    'matching': {
        'relevance_per_occurrence': 20,
        'max_relevance': 100,
        'bonus_per_skill': 5,
        'max_missing_in_suggestion': 3,
        'summary_skill_limit': 4,
    },
    'report': {'resume_title': 'Resume', 'output_dir': '.'},
    'logging': {'level': 'WARNING'},
}


class ConfigError(JobMatchError):
    """Configuration file or value is invalid"""
    pass


class MatchingSettings(BaseModel):
    vocabulary: Optional[list[str]] = None
    relevance_per_occurrence: int = Field(20, ge=1)
    max_relevance: int = Field(100, ge=1, le=100)
    bonus_per_skill: float = Field(5, ge=0)
    max_missing_in_suggestion: int = Field(3, ge=1)
    summary_skill_limit: int = Field(4, ge=1, le=4)


class ReportSettings(BaseModel):
    resume_title: str = 'Resume'
    output_dir: str = '.'


class LoggingSettings(BaseModel):
    level: str = Field('WARNING')

    @field_validator('level')
    @classmethod
    def _level(cls, v: str) -> str:
        allowed = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if v.upper() not in allowed:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()


class AppConfig(BaseModel):
    matching: MatchingSettings = MatchingSettings()
    report: ReportSettings = ReportSettings()
    logging: LoggingSettings = LoggingSettings()


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")
    return data


def _merge(layers) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    for layer in layers:
        for k, v in layer.items():
            if isinstance(v, dict) and isinstance(merged.get(k), dict):
                merged[k] = {**merged[k], **v}
            elif isinstance(v, dict):
                merged[k] = dict(v)
            else:
                merged[k] = v
    return merged


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for k, v in environ.items():
        if not k.startswith(ENV_PREFIX):
            continue
        path = k[len(ENV_PREFIX):].lower().split('__')
        cur = overrides
        for seg in path[:-1]:
            cur = cur.setdefault(seg, {})
        # YAML scalars so "3" becomes 3 and "[Go, Rust]" a list
        try:
            cur[path[-1]] = yaml.safe_load(v)
        except yaml.YAMLError:
            cur[path[-1]] = v
    return overrides


def load_config(
    explicit: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Merge every configuration layer into one dict (not yet validated)"""
    if explicit is not None and not Path(explicit).exists():
        raise ConfigError(f"Config file not found: {explicit}")

    layers = [
        DEFAULTS,
        _load_yaml(Path.home() / '.jobmatch' / 'config.yaml'),
        _load_yaml(Path('jobmatch.yaml')),
    ]
    if explicit is not None:
        layers.append(_load_yaml(Path(explicit)))
    merged = _merge(layers)

    env = os.environ if environ is None else environ
    for section, values in _env_overrides(env).items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **values}
        else:
            merged[section] = values
    return merged


def validate_config(conf: Dict[str, Any]) -> AppConfig:
    """Check the merged config against the JSON schema and the pydantic model"""
    schema = json.loads(SCHEMA_PATH.read_text(encoding='utf-8'))
    try:
        js_validate(instance=conf, schema=schema)
    except SchemaValidationError as e:
        location = '.'.join(str(p) for p in e.absolute_path) or '<root>'
        raise ConfigError(f"Config invalid at {location}: {e.message}") from e

    try:
        return AppConfig(**conf)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed: {e.errors()}") from e


def matching_config_from(conf: Dict[str, Any]) -> MatchingConfig:
    """Build the pipeline configuration from a merged config dict"""
    settings = validate_config(conf).matching
    vocabulary = tuple(settings.vocabulary) if settings.vocabulary else DEFAULT_VOCABULARY
    return MatchingConfig(
        vocabulary=vocabulary,
        relevance_per_occurrence=settings.relevance_per_occurrence,
        max_relevance=settings.max_relevance,
        bonus_per_skill=settings.bonus_per_skill,
        max_missing_in_suggestion=settings.max_missing_in_suggestion,
        summary_skill_limit=settings.summary_skill_limit,
    )
