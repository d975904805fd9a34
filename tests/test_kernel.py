import gzip

import pytest

from conftest import KERNEL_CONFIG
from kcheck import (
    RawTriState,
    SourceReadError,
    SourceUnavailableError,
    discover_kernel_config,
    load_observed,
    read_kernel_config,
)
from kcheck import kernel


class TestReadKernelConfig:
    def test_plain(self, kernel_config_file):
        assert read_kernel_config(kernel_config_file) == KERNEL_CONFIG.encode()

    def test_gzip(self, kernel_config_gz):
        assert read_kernel_config(kernel_config_gz) == KERNEL_CONFIG.encode()

    def test_gzip_detected_by_magic_not_name(self, tmp_path):
        path = tmp_path / "config"
        path.write_bytes(gzip.compress(b"CONFIG_FOO=y\n"))
        assert read_kernel_config(path) == b"CONFIG_FOO=y\n"

    def test_corrupt_gzip(self, tmp_path):
        path = tmp_path / "config.gz"
        path.write_bytes(gzip.compress(KERNEL_CONFIG.encode())[:20])
        with pytest.raises(SourceReadError) as excinfo:
            read_kernel_config(path)
        assert excinfo.value.path == path

    def test_missing(self, tmp_path):
        with pytest.raises(SourceReadError, match="File does not exist"):
            read_kernel_config(tmp_path / "missing")

    def test_directory(self, tmp_path):
        with pytest.raises(SourceReadError):
            read_kernel_config(tmp_path)


class TestDiscoverKernelConfig:
    def test_first_existing_path_wins(self, tmp_path):
        first = tmp_path / "config.gz"
        second = tmp_path / "config"
        second.write_text("")
        assert discover_kernel_config([first, second]) == second
        first.write_text("")
        assert discover_kernel_config([first, second]) == first

    def test_nothing_found(self, tmp_path):
        with pytest.raises(SourceUnavailableError) as excinfo:
            discover_kernel_config([tmp_path / "a", tmp_path / "b"])
        assert excinfo.value.searched == (str(tmp_path / "a"), str(tmp_path / "b"))

    def test_system_paths_include_release(self, monkeypatch):
        monkeypatch.setattr(kernel.utils, "kernel_release", lambda: "6.1.0-test")
        paths = [str(p) for p in kernel.system_config_paths()]
        assert paths == ["/proc/config.gz", "/boot/config", "/boot/config-6.1.0-test"]


class TestLoadObserved:
    def test_explicit_path(self, kernel_config_file):
        observed = load_observed(kernel_config_file)
        assert observed.state("CONFIG_BAR") is RawTriState.MODULE
        assert observed.path == kernel_config_file

    def test_explicit_gzip_path(self, kernel_config_gz):
        assert load_observed(kernel_config_gz).state("CONFIG_FOO") is RawTriState.YES

    def test_explicit_missing_path_is_read_error(self, tmp_path):
        with pytest.raises(SourceReadError):
            load_observed(tmp_path / "missing")

    def test_discovery(self, monkeypatch, kernel_config_gz, tmp_path):
        monkeypatch.setattr(
            kernel, "system_config_paths", lambda: [tmp_path / "nope", kernel_config_gz]
        )
        observed = load_observed()
        assert observed.path == kernel_config_gz
        assert observed.state("CONFIG_USB_ACM") is RawTriState.YES

    def test_discovery_fails_unavailable(self, monkeypatch, tmp_path):
        monkeypatch.setattr(kernel, "system_config_paths", lambda: [tmp_path / "nope"])
        with pytest.raises(SourceUnavailableError):
            load_observed()

    def test_never_returns_empty_on_read_failure(self, tmp_path):
        path = tmp_path / "config"
        path.write_bytes(b"\x1f\x8bnot really gzip")
        with pytest.raises(SourceReadError):
            load_observed(path)
