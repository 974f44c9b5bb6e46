import pytest

from ocmadm import cmd


@pytest.mark.parametrize(
    "arg0, want",
    [
        ("oc", "oc cm"),
        ("kubectl", "kubectl cm"),
        ("cm", "cm"),
    ],
    ids=["oc", "kubectl", "not-defined"],
)
def test_get_example_header(monkeypatch, arg0, want):
    monkeypatch.setattr("sys.argv", [arg0])
    assert cmd.get_example_header() == want


def test_dry_run_message_printed(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["kubectl"])
    cmd.dry_run_message(True)
    assert capsys.readouterr().out == "kubectl cm is running in dry-run mode\n"


def test_dry_run_message_silent(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["oc"])
    cmd.dry_run_message(False)
    assert capsys.readouterr().out == ""