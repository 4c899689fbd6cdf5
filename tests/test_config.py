"""
Configuration tests
"""

import unittest

import pytest

from framegraph import FrameGraphConfig, GraphConfigurationError, create_production_config, create_test_config


class TestFrameGraphConfig(unittest.TestCase):
    """Test FrameGraph configuration"""

    def test_test_config(self):
        config = create_test_config()

        self.assertEqual(config.LOG_LEVEL, 'DEBUG')
        self.assertTrue(config.ENABLE_PLAN_LOGGING)
        self.assertTrue(config.DEVELOPMENT_MODE)

    def test_production_config_overrides(self):
        config = create_production_config(SLOW_OPERATION_THRESHOLD=10.0)

        self.assertFalse(config.DEVELOPMENT_MODE)
        self.assertEqual(config.SLOW_OPERATION_THRESHOLD, 10.0)

    def test_invalid_log_level(self):
        with self.assertRaises(GraphConfigurationError):
            FrameGraphConfig(LOG_LEVEL='LOUD')

    def test_invalid_threshold(self):
        with self.assertRaises(GraphConfigurationError):
            FrameGraphConfig(SLOW_OPERATION_THRESHOLD=0)

    def test_update_from_dict(self):
        config = FrameGraphConfig()
        config.update_from_dict({'ENABLE_PLAN_LOGGING': True})

        self.assertTrue(config.ENABLE_PLAN_LOGGING)

        with self.assertRaises(GraphConfigurationError):
            config.update_from_dict({'REDIS_HOST': 'localhost'})

        with self.assertRaises(GraphConfigurationError):
            config.update_from_dict({'SLOW_OPERATION_THRESHOLD': -1})

    def test_to_dict(self):
        self.assertEqual(
            set(FrameGraphConfig().to_dict()),
            {'LOG_LEVEL', 'ENABLE_PLAN_LOGGING', 'SLOW_OPERATION_THRESHOLD', 'DEVELOPMENT_MODE'},
        )


def test_environment_defaults(monkeypatch):
    monkeypatch.setenv('FRAMEGRAPH_PLAN_LOG', 'true')
    monkeypatch.setenv('FRAMEGRAPH_SLOW_THRESHOLD', '2.5')

    config = FrameGraphConfig()

    assert config.ENABLE_PLAN_LOGGING is True
    assert config.SLOW_OPERATION_THRESHOLD == pytest.approx(2.5)


if __name__ == '__main__':
    unittest.main()
