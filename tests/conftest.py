import gzip

import pytest

from kcheck import DesiredState, Fragment, KernelOption

KERNEL_CONFIG = "\n".join(
    [
        "#",
        "# Automatically generated file; DO NOT EDIT.",
        "#",
        "CONFIG_FOO=y",
        "CONFIG_BAR=m",
        "# CONFIG_BAZ is not set",
        "CONFIG_USB_ACM=y",
        'CONFIG_DEFAULT_HOSTNAME="(none)"',
        "CONFIG_LOG_BUF_SHIFT=17",
        "",
    ]
)

DOCUMENT_TOML = """
[[fragment]]
name = "basics"
reason = "Core features"

[[fragment.kernel]]
name = "CONFIG_FOO"
state = "On"

[[fragment.kernel]]
name = "CONFIG_BAR"
state = "Module"

[[fragment]]
name = "usb-serial"

[[fragment.kernel]]
name = "CONFIG_BAZ"
state = "Off"

[[fragment.kernel]]
name = "CONFIG_USB_ACM"
state = "Enabled"
"""

DOCUMENT_JSON = """
{
  "fragment": [
    {
      "name": "basics",
      "reason": "Core features",
      "kernel": [
        {"name": "CONFIG_FOO", "state": "On"},
        {"name": "CONFIG_BAR", "state": "Module"}
      ]
    },
    {
      "name": "usb-serial",
      "kernel": [
        {"name": "CONFIG_BAZ", "state": "Off"},
        {"name": "CONFIG_USB_ACM", "state": "Enabled"}
      ]
    }
  ]
}
"""


@pytest.fixture
def expected_fragments():
    """The fragments both DOCUMENT_TOML and DOCUMENT_JSON describe."""
    return [
        Fragment(
            "basics",
            "Core features",
            (
                KernelOption("CONFIG_FOO", DesiredState.ON),
                KernelOption("CONFIG_BAR", DesiredState.MODULE),
            ),
        ),
        Fragment(
            "usb-serial",
            None,
            (
                KernelOption("CONFIG_BAZ", DesiredState.OFF),
                KernelOption("CONFIG_USB_ACM", DesiredState.ENABLED),
            ),
        ),
    ]


@pytest.fixture
def kernel_config_file(tmp_path):
    path = tmp_path / "config"
    path.write_text(KERNEL_CONFIG)
    return path


@pytest.fixture
def kernel_config_gz(tmp_path):
    path = tmp_path / "config.gz"
    path.write_bytes(gzip.compress(KERNEL_CONFIG.encode()))
    return path


@pytest.fixture
def toml_document(tmp_path):
    path = tmp_path / "kcheck.toml"
    path.write_text(DOCUMENT_TOML)
    return path


@pytest.fixture
def json_document(tmp_path):
    path = tmp_path / "kcheck.json"
    path.write_text(DOCUMENT_JSON)
    return path


@pytest.fixture
def no_system_documents(monkeypatch, tmp_path):
    """Points the /etc document lookup at files that don't exist."""
    from kcheck import document

    monkeypatch.setattr(
        document,
        "SYSTEM_DOCUMENTS",
        (tmp_path / "etc" / "kcheck.toml", tmp_path / "etc" / "kcheck.json"),
    )
