from __future__ import annotations

import pytest

from psc.source import load_config_file, read_config_text


def test_load_config_file_reads_and_loads(tmp_path) -> None:  # type: ignore[no-untyped-def]
    p = tmp_path / "Permissions.PSC"
    p.write_text(">> STAFF > staff\nCarol\n", encoding="utf-8")
    c = load_config_file(str(p))
    assert c.get_players("STAFF") == ["Carol"]


def test_read_config_text_honors_encoding(tmp_path) -> None:  # type: ignore[no-untyped-def]
    p = tmp_path / "Permissions.PSC"
    p.write_bytes(">> VIP > vip\nJos\xe9\n".encode("latin-1"))
    assert read_config_text(str(p), encoding="latin-1") == ">> VIP > vip\nJos\xe9\n"


def test_read_config_text_invalid_bytes_raise_value_error(tmp_path) -> None:  # type: ignore[no-untyped-def]
    p = tmp_path / "Permissions.PSC"
    p.write_bytes(b">> VIP > vip\n\xff\xfeAlice\n")
    with pytest.raises(ValueError):
        read_config_text(str(p))
