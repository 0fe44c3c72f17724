import pytest
from PIL import Image

from consolepic.cli import main


def test_draws_still_image(tmp_path, capsys):
    path = tmp_path / "red.png"
    Image.new("RGB", (10, 10), (255, 0, 0)).save(path)
    main([str(path), "-W", "3", "-H", "2"])
    out = capsys.readouterr().out
    assert out.startswith("\033[2J\033[H")
    assert "\033[91;101m" in out
    assert out.count("@") == 6
    assert "\033[0m" in out


def test_plays_animation_loops(tmp_path, capsys):
    path = tmp_path / "anim.gif"
    frames = [Image.new("RGB", (4, 4), colour) for colour in [(255, 0, 0), (0, 0, 255)]]
    frames[0].save(path, save_all=True, append_images=frames[1:], duration=10, loop=0)
    main([str(path), "-W", "2", "-H", "2", "-d", "0", "-l", "2"])
    out = capsys.readouterr().out
    assert out.count("\033[91;101m") == 2
    assert out.count("\033[94;104m") == 2


def test_missing_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.png")])
    assert exc.value.code == 1
    assert "File not found" in capsys.readouterr().err


def test_unreadable_file_exits(tmp_path, capsys):
    path = tmp_path / "bad.png"
    path.write_bytes(b"garbage")
    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code == 1
    assert "Cannot read image" in capsys.readouterr().err


@pytest.mark.parametrize(
    "options, message",
    [
        (["-W", "0"], "dimensions must be positive"),
        (["-H", "-3"], "dimensions must be positive"),
        (["-l", "-1"], "loops cannot be negative"),
        (["-d", "-5"], "delay cannot be negative"),
    ],
)
def test_bad_numbers_are_usage_errors(tmp_path, capsys, options, message):
    path = tmp_path / "red.png"
    Image.new("RGB", (4, 4), (255, 0, 0)).save(path)
    with pytest.raises(SystemExit) as exc:
        main([str(path), *options])
    assert exc.value.code == 2
    assert message in capsys.readouterr().err
