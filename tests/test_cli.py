"""Tests for the img2header command line (img2header.__main__)."""

import json
from pathlib import Path

import pytest
from img2header.__main__ import main
from PIL import Image

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated cwd: no .env is picked up and no IMG2HEADER_* leaks in."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    for key in ('IMG2HEADER_COLORS', 'IMG2HEADER_DIALECT', 'IMG2HEADER_NEAREST'):
        # setenv first so teardown also removes values a .env loaded during the test
        monkeypatch.setenv(key, '')
        monkeypatch.delenv(key)
    return tmp_path


def _png(directory: Path, name: str, pixels: list[tuple[int, int, int, int]], width: int, height: int) -> Path:
    img = Image.new('RGBA', (width, height))
    img.putdata(pixels)
    path = directory / name
    img.save(path)
    return path


class TestWriteFile:
    def test_plain_array_default_output(self, workdir: Path) -> None:
        src = _png(workdir, 'sprite.png', [RED, GREEN], 2, 1)
        assert main(['plain-array', str(src)]) == 0
        text = (workdir / 'sprite.h').read_text()
        assert '#ifndef SPRITE_H' in text
        assert '0xFF0000FF, 0x00FF00FF' in text

    def test_struct_wrapped_into_output_dir(self, workdir: Path) -> None:
        src = _png(workdir, 'My Sprite!.png', [RED, GREEN], 2, 1)
        out = workdir / 'include'
        assert main(['struct-wrapped', str(src), '-o', str(out)]) == 0
        text = (out / 'My Sprite!_img.h').read_text()
        assert text.startswith('#ifndef MY_SPRITE__H\n')
        assert 'My_Sprite__image_t' in text

    def test_refuses_to_overwrite(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        src = _png(workdir, 'a.png', [RED], 1, 1)
        (workdir / 'a.h').write_text('keep me')
        assert main(['plain-array', str(src)]) == 1
        assert (workdir / 'a.h').read_text() == 'keep me'
        assert 'already exists' in capsys.readouterr().err

    def test_force_overwrites(self, workdir: Path) -> None:
        src = _png(workdir, 'a.png', [RED], 1, 1)
        (workdir / 'a.h').write_text('old')
        assert main(['plain-array', str(src), '--force']) == 0
        assert '#ifndef A_H' in (workdir / 'a.h').read_text()

    def test_summary_json(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        src = _png(workdir, 'tri.png', [RED, GREEN, BLUE], 3, 1)
        assert main(['plain-array', str(src), '-c', '2', '--json']) == 0
        summary = json.loads(capsys.readouterr().out)
        assert summary['palette'] == {'size': 2, 'limit': 2, 'overflow_pixels': 1}
        assert summary['output'].endswith('tri.h')


class TestStdout:
    def test_header_on_stdout(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        src = _png(workdir, 'dot.png', [(10, 20, 30, 40)], 1, 1)
        assert main(['plain-array', str(src), '--direct', '--stdout']) == 0
        captured = capsys.readouterr()
        assert '0x0A141E28' in captured.out
        assert 'direct colour' in captured.err
        assert not (workdir / 'dot.h').exists()

    def test_name_override(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        src = _png(workdir, 'x.png', [RED], 1, 1)
        assert main(['namespaced-constexpr', str(src), '--stdout', '-n', 'boot logo']) == 0
        assert 'namespace boot_logo {' in capsys.readouterr().out

    def test_numpy_strategy_same_output(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        pixels = [(i * 17 % 256, i * 5 % 256, i * 3 % 256, 255) for i in range(16)]
        src = _png(workdir, 'n.png', pixels, 4, 4)
        main(['plain-array', str(src), '--stdout', '-c', '3'])
        linear = capsys.readouterr().out
        main(['plain-array', str(src), '--stdout', '-c', '3', '--nearest', 'numpy'])
        assert capsys.readouterr().out == linear


class TestErrors:
    def test_zero_colours(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        src = _png(workdir, 'a.png', [RED], 1, 1)
        assert main(['plain-array', str(src), '-c', '0']) == 1
        assert 'img2header: error:' in capsys.readouterr().err
        assert not (workdir / 'a.h').exists()

    def test_missing_image(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['plain-array', str(workdir / 'ghost.png')]) == 1
        assert 'not found' in capsys.readouterr().err

    def test_unknown_dialect_is_usage_error(self, workdir: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['fortran', 'a.png'])
        assert exc.value.code == 2

    def test_no_dialect(self, workdir: Path) -> None:
        assert main([]) == 1

    def test_malformed_env_setting(self, workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('IMG2HEADER_COLORS', 'many')
        assert main(['help']) == 1


class TestEnvFile:
    def test_colors_from_dotenv(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (workdir / '.env').write_text('IMG2HEADER_COLORS=1\n')
        src = _png(workdir, 'tri.png', [RED, GREEN, BLUE], 3, 1)
        assert main(['plain-array', str(src), '--stdout']) == 0
        captured = capsys.readouterr()
        assert 'tri_palette[1]' in captured.out
        assert 'loaded' in captured.err

    def test_explicit_env_file(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        env = workdir / 'ci.env'
        env.write_text('IMG2HEADER_COLORS=2\n')
        src = _png(workdir, 'tri.png', [RED, GREEN, BLUE], 3, 1)
        assert main(['--env-file', str(env), 'plain-array', str(src), '--stdout']) == 0
        assert 'tri_palette[2]' in capsys.readouterr().out


class TestHelp:
    def test_lists_dialects(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['help']) == 0
        out = capsys.readouterr().out
        for name in ('plain-array', 'struct-wrapped', 'namespaced-constexpr'):
            assert name in out

    def test_dialect_docs(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['help', 'struct-wrapped']) == 0
        assert 'typedef' in capsys.readouterr().out

    def test_unknown_dialect_docs(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(['help', 'nope']) == 1
        assert 'Unknown dialect' in capsys.readouterr().err
