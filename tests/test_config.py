"""Tests for legibility_checker.core.config: .env loading and Settings."""

import os
from pathlib import Path

import pytest
from legibility_checker.core.config import Settings, find_dotenv, load_env, load_settings, parse_dotenv

ENV_VARS = ('LEGIBILITY_MIN_RATIO', 'LEGIBILITY_PROBE_ALPHA', 'LEGIBILITY_LOG_LEVEL')


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        # setenv first so teardown also removes values load_env() writes
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    return monkeypatch


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('LEGIBILITY_MIN_RATIO=7\n')
        assert parse_dotenv(f) == {'LEGIBILITY_MIN_RATIO': '7'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('A="hello world"\nB=\'single\'\n')
        assert parse_dotenv(f) == {'A': 'hello world', 'B': 'single'}

    def test_comments_and_blanks_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\nNOEQUALS\n')
        assert parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (tmp_path / '.env').write_text('X=1\n')
        src = repo / 'src'
        src.mkdir()
        assert find_dotenv(src) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        (tmp_path / '.env').write_text('X=1\n')
        assert find_dotenv(repo) is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
        (tmp_path / '.env').write_text('LEGIBILITY_MIN_RATIO=7\n')
        clean_env.chdir(tmp_path)
        assert load_env() == tmp_path / '.env'
        assert os.environ.get('LEGIBILITY_MIN_RATIO') == '7'

    def test_does_not_overwrite_existing(self, tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv('LEGIBILITY_MIN_RATIO', '3')
        (tmp_path / '.env').write_text('LEGIBILITY_MIN_RATIO=7\n')
        clean_env.chdir(tmp_path)
        load_env()
        assert os.environ.get('LEGIBILITY_MIN_RATIO') == '3'

    def test_explicit_env_file(self, tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
        f = tmp_path / 'custom.env'
        f.write_text('LEGIBILITY_PROBE_ALPHA=0.25\n')
        assert load_env(env_file=str(f)) == f
        assert os.environ.get('LEGIBILITY_PROBE_ALPHA') == '0.25'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'absent.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestLoadSettings:
    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        assert load_settings() == Settings()

    def test_from_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv('LEGIBILITY_MIN_RATIO', '7')
        clean_env.setenv('LEGIBILITY_PROBE_ALPHA', '0.3')
        clean_env.setenv('LEGIBILITY_LOG_LEVEL', 'debug')
        assert load_settings() == Settings(min_ratio=7.0, probe_alpha=0.3, log_level='DEBUG')

    def test_bad_number_uses_default(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv('LEGIBILITY_MIN_RATIO', 'lots')
        assert load_settings().min_ratio == 4.5

    def test_non_finite_number_uses_default(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv('LEGIBILITY_PROBE_ALPHA', 'nan')
        clean_env.setenv('LEGIBILITY_MIN_RATIO', 'inf')
        assert load_settings() == Settings()

    def test_bad_level_uses_warning(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv('LEGIBILITY_LOG_LEVEL', 'LOUD')
        assert load_settings().log_level == 'WARNING'
