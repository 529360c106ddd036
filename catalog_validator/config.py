# Copyright 2025 TIER IV, inc.
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

"""Configuration management for the catalog validator."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging, parse_log_level


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ValidatorConfig:
    """Configuration class for catalog validation runs."""
    log_level: str = "INFO"
    print_level: str = "ERROR"
    cache_enabled: bool = False

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('CATALOG_VALIDATOR_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('CATALOG_VALIDATOR_PRINT_LEVEL', 'ERROR'),
            cache_enabled=_env_flag('CATALOG_VALIDATOR_CACHE_ENABLED', 'false'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = parse_log_level(self.log_level, logging.INFO)
        stderr_level = parse_log_level(self.print_level, logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('catalog_validator')


# Global configuration instance
validator_config = ValidatorConfig.from_env()
