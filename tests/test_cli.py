"""Tests for the dnssdnames command line entry point."""

import json

import pytest

from dnssdnames import main


def test_main_prints_parts(capfd):
    """Test main prints one JSON object per name."""
    status = main(["MyPrinter._ipp._tcp.default.service.arpa", "myhost.local"])
    captured = capfd.readouterr()
    lines = captured.out.splitlines()

    assert status == 0
    assert json.loads(lines[0]) == {
        "instance_name": "MyPrinter",
        "service_name": "_ipp._tcp",
        "domain": "default.service.arpa.",
        "subtypes": [],
        "kind": "service_instance",
    }
    assert json.loads(lines[1]) == {
        "host_name": "myhost",
        "domain": "local.",
        "kind": "host",
    }


def test_main_expect_matching_shape(capfd):
    """Test --expect passes names of the right shape through."""
    status = main(["--expect", "service", "_ipp._tcp.local."])
    captured = capfd.readouterr()

    assert status == 0
    assert json.loads(captured.out)["service_name"] == "_ipp._tcp"


def test_main_expect_wrong_shape(capfd):
    """Test --expect reports names of the wrong shape."""
    status = main(["--expect", "host", "_ipp._tcp.local.", "myhost.local."])
    captured = capfd.readouterr()

    assert status == 1
    assert "_ipp._tcp.local.: not a host name (invalid_args)" in captured.err
    assert json.loads(captured.out)["host_name"] == "myhost"


def test_main_requires_a_name(capfd):
    """Test main exits with a usage error when no name is given."""
    with pytest.raises(SystemExit):
        main([])
    captured = capfd.readouterr()
    assert "usage" in captured.err
