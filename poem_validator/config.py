# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Runtime configuration for the poem validator."""

import os
import logging
import logging.config
from dataclasses import dataclass
from typing import Any, Callable, Dict


LOG_FORMAT = '%(name)s - %(levelname)s - %(message)s'

_TRUE_VALUES = ("1", "true", "yes", "on")


def _resolve_level(name: str, default: int) -> int:
    level = getattr(logging, str(name).upper(), None)
    if isinstance(level, int):
        return level
    return default


def _below_level(level: int) -> Callable[[logging.LogRecord], bool]:
    # dictConfig filter factory: keep records that belong on stdout
    def _filter(record: logging.LogRecord) -> bool:
        return record.levelno < level
    return _filter


@dataclass
class ValidatorConfig:
    """Configuration class for a validation run.

    Log records below ``print_level`` go to stdout, the rest to stderr.
    """
    log_level: str = "WARNING"
    print_level: str = "ERROR"
    strict_language: bool = False

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('POEM_VALIDATOR_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('POEM_VALIDATOR_PRINT_LEVEL', 'ERROR'),
            strict_language=os.getenv('POEM_VALIDATOR_STRICT_LANGUAGE', 'false').strip().lower() in _TRUE_VALUES,
        )

    def logging_dict(self) -> Dict[str, Any]:
        """Build the ``logging.config.dictConfig`` mapping for this configuration."""
        level = _resolve_level(self.log_level, logging.WARNING)
        stderr_level = max(_resolve_level(self.print_level, logging.ERROR), logging.DEBUG)

        return {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'plain': {'format': LOG_FORMAT},
            },
            'filters': {
                'below_stderr': {'()': _below_level, 'level': stderr_level},
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'stream': 'ext://sys.stdout',
                    'level': logging.DEBUG,
                    'filters': ['below_stderr'],
                    'formatter': 'plain',
                },
                'stderr': {
                    'class': 'logging.StreamHandler',
                    'stream': 'ext://sys.stderr',
                    'level': stderr_level,
                    'formatter': 'plain',
                },
            },
            'root': {
                'level': level,
                'handlers': ['stdout', 'stderr'],
            },
        }

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        logging.config.dictConfig(self.logging_dict())
        return logging.getLogger('poem_validator')
