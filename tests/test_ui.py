from rustdrills import ui


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert ui.no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True


def test_emoji_picks_plain_when_disabled(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.emoji("🎉", "★") == "★"


def test_emoji_picks_fancy_when_enabled(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert ui.emoji("🎉", "★") == "🎉"


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = ui.warn("careful")
    assert line == "! careful"
    assert capsys.readouterr().out.strip() == "! careful"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = ui.success("done")
    assert line == "✓ done"
    assert capsys.readouterr().out.strip() == "✓ done"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    line = ui.warn("careful")
    assert line.startswith("⚠️")
    assert line.endswith(" careful")
    assert "careful" in capsys.readouterr().out


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    line = ui.success("done")
    assert line.startswith("✅")
    assert "done" in capsys.readouterr().out