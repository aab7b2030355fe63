import pytest
from PIL import Image as PILImage

from chibitools.imageconverter import load_bin
from chibitools.tools import clear_dir, collect_hanzi, convert_images, main


def _make_png(path, w=3, h=3):
    img = PILImage.new("RGBA", (w, h), (0, 0, 0, 0))
    img.putpixel((1, 1), (248, 0, 0, 255))
    img.save(path)


def test_clear_dir_missing_and_empty_path(tmp_path):
    assert clear_dir(tmp_path / "nope") is False
    assert clear_dir("") is False


def test_clear_dir_removes_nested_content(tmp_path):
    (tmp_path / "a.txt").write_text("x")
    nested = tmp_path / "sub" / "deeper"
    nested.mkdir(parents=True)
    (nested / "b.txt").write_text("y")
    assert clear_dir(tmp_path) is True
    assert list(tmp_path.iterdir()) == []
    assert tmp_path.is_dir()


def test_collect_hanzi_dedupes_and_skips_dirs(tmp_path):
    game = tmp_path / "game"
    (game / "story").mkdir(parents=True)
    (game / "fonts").mkdir()
    (game / "story" / "a.txt").write_text("你好abc你", encoding="utf-8")
    (game / "story" / "b.txt").write_text("好世", encoding="utf-8")
    (game / "fonts" / "c.txt").write_text("字", encoding="utf-8")
    (game / "top.txt").write_text("顶", encoding="utf-8")
    output = tmp_path / "allgb.txt"
    result = collect_hanzi(game, output)
    assert result == "你好世"
    assert output.read_text(encoding="utf-8") == result


def test_convert_images_replaces_old_output(tmp_path):
    src = tmp_path / "imgs"
    src.mkdir()
    _make_png(src / "hero.png")
    _make_png(src / "tree.PNG")
    (src / "notes.txt").write_text("ignore")
    out = tmp_path / "image"
    out.mkdir()
    (out / "stale").write_text("old")
    targets = convert_images(src, out)
    assert sorted(p.name for p in out.iterdir()) == ["hero", "tree"]
    assert [t.name for t in targets] == ["hero", "tree"]
    image = load_bin(out / "hero")
    assert (image.x, image.y, image.dw, image.dh) == (1, 1, 1, 1)


def test_main_images_command(tmp_path, capsys):
    src = tmp_path / "imgs"
    src.mkdir()
    _make_png(src / "icon.png")
    out = tmp_path / "image"
    out.mkdir()
    assert main(["images", str(src), str(out)]) == 0
    assert (out / "icon").exists()
    assert "icon" in capsys.readouterr().out


def test_main_hanzi_command(tmp_path, capsys):
    game = tmp_path / "game"
    (game / "text").mkdir(parents=True)
    (game / "text" / "s.txt").write_text("天地", encoding="utf-8")
    output = tmp_path / "chars.txt"
    assert main(["hanzi", str(game), str(output)]) == 0
    assert output.read_text(encoding="utf-8") == "天地"


def test_main_requires_command():
    with pytest.raises(SystemExit):
        main([])