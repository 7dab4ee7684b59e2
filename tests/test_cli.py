"""
Tests for the command line interface.

Run with: pytest tests/ -v
"""

from click.testing import CliRunner
from loguru import logger

from iwparsers import __version__
from iwparsers.cli import main


class TestCli:
    """Tests for the click commands."""

    def setup_method(self):
        self.runner = CliRunner()

    def teardown_method(self):
        # Commands attach a sink to the runner's stderr, which is closed afterwards
        logger.remove()

    def test_version(self):
        result = self.runner.invoke(main, ['--version'])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_list_types(self):
        result = self.runner.invoke(main, ['list-types'])
        assert result.exit_code == 0
        assert 'de_info_schiff' in result.output
        assert 'de_index_geb' in result.output

    def test_detect(self, tmp_path, building_queue_text):
        path = tmp_path / 'screen.txt'
        path.write_text(building_queue_text, encoding='utf-8')
        result = self.runner.invoke(main, ['detect', str(path)])
        assert result.exit_code == 0
        assert 'de_index_geb' in result.output

    def test_detect_unknown(self, tmp_path):
        path = tmp_path / 'screen.txt'
        path.write_text('nothing to see', encoding='utf-8')
        result = self.runner.invoke(main, ['detect', str(path)])
        assert result.exit_code == 1

    def test_parse_json(self, tmp_path, building_queue_text):
        path = tmp_path / 'screen.txt'
        path.write_text(building_queue_text, encoding='utf-8')
        result = self.runner.invoke(main, ['parse', str(path), '--json'])
        assert result.exit_code == 0
        assert '"identifier": "de_index_geb"' in result.output
        assert '"planet_name": "Erde"' in result.output

    def test_parse_stdin_with_type(self, ship_overview_text):
        result = self.runner.invoke(
            main, ['parse', '-', '--type', 'de_mil_schiff_uebersicht'], input=ship_overview_text
        )
        assert result.exit_code == 0
        assert 'Parsed as de_mil_schiff_uebersicht' in result.output

    def test_parse_output_file(self, tmp_path, building_queue_text):
        source = tmp_path / 'screen.txt'
        source.write_text(building_queue_text, encoding='utf-8')
        target = tmp_path / 'out' / 'outcome.json'
        result = self.runner.invoke(main, ['parse', str(source), '-o', str(target)])
        assert result.exit_code == 0
        assert '"success": true' in target.read_text(encoding='utf-8')

    def test_parse_failure_exit_code(self, tmp_path):
        path = tmp_path / 'screen.txt'
        path.write_text('nothing to see', encoding='utf-8')
        result = self.runner.invoke(main, ['parse', str(path)])
        assert result.exit_code == 1
        assert 'Parsing failed' in result.output

    def test_parse_with_config(self, tmp_path, building_queue_text):
        config = tmp_path / 'locale.yaml'
        config.write_text('locale:\n  timezone: UTC\n', encoding='utf-8')
        source = tmp_path / 'screen.txt'
        source.write_text(building_queue_text, encoding='utf-8')
        result = self.runner.invoke(main, ['parse', str(source), '-c', str(config), '--json'])
        assert result.exit_code == 0
        # 24.12.2010 15:30 read as UTC
        assert '"finish_time": 1293204600' in result.output
