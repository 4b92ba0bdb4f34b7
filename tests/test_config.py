################################################################################
# File Name: test_config.py
# Purpose/Description: Tests for loading analysis settings
# Author: Michael Cornelison
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | M. Cornelison | Initial implementation
# ================================================================================
################################################################################

"""
Tests for the common.config module.

Run with:
    pytest tests/test_config.py -v
"""

import dataclasses
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from common.config import SETTING_KEYS, AnalysisSettings, loadSettings
from common.error_handler import ConfigurationError, ErrorCategory


class TestLoadSettings:
    """Tests for loadSettings()."""

    def test_loadSettings_emptyConfig_returnsDefaults(self):
        """
        Given: Empty config
        When: loadSettings() is called
        Then: Returns INFO level, no file, failFast off
        """
        assert loadSettings({}) == AnalysisSettings('INFO', None, False)

    def test_loadSettings_fullConfig_readsEveryKey(self, tmp_path: Path):
        """
        Given: Config setting level, file and failFast
        When: loadSettings() is called
        Then: Each value lands in its field
        """
        logFile = str(tmp_path / 'statistics.log')
        config = {
            'logging': {'level': 'WARNING', 'file': logFile},
            'batch': {'failFast': True}
        }

        result = loadSettings(config)

        assert result.logLevel == 'WARNING'
        assert result.logFile == logFile
        assert result.failFast is True

    def test_loadSettings_unrelatedSections_ignored(self, sampleConfig: Dict[str, Any]):
        """
        Given: Config shared with an application section
        When: loadSettings() is called
        Then: Only the known keys are read
        """
        result = loadSettings(sampleConfig)

        assert result == AnalysisSettings(logLevel='DEBUG', failFast=True)

    def test_loadSettings_lowercaseLevel_accepted(self):
        """
        Given: Level written in lower case
        When: loadSettings() is called
        Then: It is accepted as given
        """
        assert loadSettings({'logging': {'level': 'debug'}}).logLevel == 'debug'

    @pytest.mark.parametrize('config, key, problem', [
        ({'logging': {'level': 10}}, 'logging.level', 'expected str, got int'),
        ({'logging': {'file': 3}}, 'logging.file', 'expected str, got int'),
        ({'batch': {'failFast': 'yes'}}, 'batch.failFast', 'expected bool, got str'),
        ({'logging': {'level': 'LOUD'}}, 'logging.level', "unknown level 'LOUD'"),
    ])
    def test_loadSettings_badValue_raisesConfigurationError(self, config, key, problem):
        """
        Given: Config with one invalid value
        When: loadSettings() is called
        Then: Raises ConfigurationError whose details name the key
        """
        with pytest.raises(ConfigurationError) as excInfo:
            loadSettings(config)

        assert excInfo.value.details == {key: problem}
        assert excInfo.value.category == ErrorCategory.CONFIGURATION

    def test_loadSettings_severalProblems_reportedTogether(self):
        """
        Given: Config with two invalid values
        When: loadSettings() is called
        Then: Both keys appear in the error details
        """
        with pytest.raises(ConfigurationError) as excInfo:
            loadSettings({'logging': {'level': 'LOUD'}, 'batch': {'failFast': 1}})

        assert set(excInfo.value.details) == {'logging.level', 'batch.failFast'}

    def test_loadSettings_sectionNotMapping_usesDefault(self):
        """
        Given: A logging section that is not a dict
        When: loadSettings() is called
        Then: The section is treated as absent
        """
        assert loadSettings({'logging': 'DEBUG'}).logLevel == 'INFO'


class TestAnalysisSettings:
    """Tests for the AnalysisSettings dataclass."""

    def test_settings_areFrozen(self):
        """
        Given: Loaded settings
        When: A field is assigned
        Then: FrozenInstanceError is raised
        """
        settings = loadSettings({})

        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.failFast = True

    def test_settingKeys_coverEveryField(self):
        """
        Given: The config key table
        When: Compared with the dataclass fields
        Then: Every field can be set from config
        """
        fields = {f.name for f in dataclasses.fields(AnalysisSettings)}

        assert {fieldName for fieldName, _ in SETTING_KEYS.values()} == fields
