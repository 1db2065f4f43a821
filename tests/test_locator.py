import unittest
from unittest.mock import patch

from opusbuilder.environment import BuildEnvironment
from opusbuilder.linkage import LinkageKind
from opusbuilder.locator import find_installed_library, probe_pkg_config

from helpers import GNU_LINUX, FakeRunner, environ


@patch('opusbuilder.locator.logger')
class TestFindInstalledLibrary(unittest.TestCase):

    def test_no_override(self, mock_logger):
        self.assertIsNone(find_installed_library(BuildEnvironment.capture(GNU_LINUX)))

    def test_first_override_wins(self, mock_logger):
        build_env = BuildEnvironment.capture(environ(GNU_LINUX, LIBOPUS_LIB_DIR="/opt/a", OPUS_LIB_DIR="/opt/b"))
        self.assertEqual(find_installed_library(build_env), "/opt/a")

    def test_second_override(self, mock_logger):
        build_env = BuildEnvironment.capture(environ(GNU_LINUX, OPUS_LIB_DIR="/opt/b"))
        self.assertEqual(find_installed_library(build_env), "/opt/b")


@patch('opusbuilder.locator.logger')
class TestProbePkgConfig(unittest.TestCase):

    def test_found_dynamic(self, mock_logger):
        runner = FakeRunner(outputs={"pkg-config --libs": "-L/usr/lib/x86_64-linux-gnu -lopus\n"})
        directive = probe_pkg_config("opus", LinkageKind.DYNAMIC, runner=runner)
        self.assertEqual(directive.library_name, "opus")
        self.assertIs(directive.linkage, LinkageKind.DYNAMIC)
        self.assertEqual(directive.search_path, "/usr/lib/x86_64-linux-gnu")
        self.assertIn("pkg-config --libs opus", runner.commands)

    def test_static_query_passes_static_flag(self, mock_logger):
        runner = FakeRunner(outputs={"pkg-config --libs": "-lopus -lm"})
        directive = probe_pkg_config("opus", LinkageKind.STATIC, runner=runner)
        self.assertIn("pkg-config --libs --static opus", runner.commands)
        self.assertIsNone(directive.search_path)

    def test_extra_libraries_are_reported(self, mock_logger):
        runner = FakeRunner(outputs={"pkg-config --libs": "-L/usr/lib -lopus -lm"})
        directive = probe_pkg_config("opus", LinkageKind.STATIC, runner=runner)
        self.assertEqual(directive.search_path, "/usr/lib")
        mock_logger.warning.assert_called_once()
        self.assertIn("-lm", mock_logger.warning.call_args[0][0])
        self.assertNotIn("-lopus", mock_logger.warning.call_args[0][0])

    def test_no_warning_for_library_alone(self, mock_logger):
        runner = FakeRunner(outputs={"pkg-config --libs": "-L/usr/lib -lopus"})
        probe_pkg_config("opus", LinkageKind.DYNAMIC, runner=runner)
        mock_logger.warning.assert_not_called()

    def test_not_found_is_a_soft_miss(self, mock_logger):
        runner = FakeRunner(failures={"pkg-config --exists": 1})
        self.assertIsNone(probe_pkg_config("opus", LinkageKind.DYNAMIC, runner=runner))
        self.assertEqual(len(runner.calls), 1)

    def test_missing_tool_is_a_soft_miss(self, mock_logger):
        runner = FakeRunner(failures={"pkg-config": -1})
        self.assertIsNone(probe_pkg_config("opus", LinkageKind.DYNAMIC, runner=runner))

    def test_libs_failure_is_a_soft_miss(self, mock_logger):
        runner = FakeRunner(failures={"pkg-config --libs": 1})
        self.assertIsNone(probe_pkg_config("opus", LinkageKind.DYNAMIC, runner=runner))

    def test_too_old_version_is_ignored(self, mock_logger):
        runner = FakeRunner(outputs={"pkg-config --modversion": "1.1.2\n"})
        self.assertIsNone(probe_pkg_config("opus", LinkageKind.DYNAMIC, min_version="1.3", runner=runner))
        mock_logger.warning.assert_called_once()

    def test_new_enough_version_is_used(self, mock_logger):
        runner = FakeRunner(outputs={"pkg-config --modversion": "1.4\n", "pkg-config --libs": "-L/usr/lib -lopus"})
        directive = probe_pkg_config("opus", LinkageKind.DYNAMIC, min_version="1.3", runner=runner)
        self.assertEqual(directive.search_path, "/usr/lib")

    def test_unparsable_version_is_ignored(self, mock_logger):
        runner = FakeRunner(outputs={"pkg-config --modversion": "not a version"})
        self.assertIsNone(probe_pkg_config("opus", LinkageKind.DYNAMIC, min_version="1.3", runner=runner))


if __name__ == "__main__":
    unittest.main()
