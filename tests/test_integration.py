"""Integration test: build a PNG with known colour counts, then run swatch-tool against it."""

import json
import os
from pathlib import Path

import pytest
from PIL import Image, ImageGrab
from swatch_tool.__main__ import main
from swatch_tool.core.report import format_text
from swatch_tool.core.types import Report
from swatch_tool.registry import all_techniques, get

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


def _run(argv: list[str], capsys: pytest.CaptureFixture) -> tuple[int, str, str]:
    """Run the CLI in-process. Returns (exit code, stdout, stderr)."""
    code = 0
    try:
        main(argv)
    except SystemExit as e:
        code = e.code or 0
    out, err = capsys.readouterr()
    return code, out, err


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from a directory with a .git boundary so no stray .env is loaded."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('SWATCH_TOP_N', raising=False)
    monkeypatch.delenv('SWATCH_INCLUDE_ALPHA', raising=False)


@pytest.fixture
def stripes(tmp_path: Path) -> Path:
    """10x10 PNG: 60 red, 30 blue, 10 green pixels."""
    img = Image.new('RGB', (10, 10), RED)
    for y in range(6, 9):
        for x in range(10):
            img.putpixel((x, y), BLUE)
    for x in range(10):
        img.putpixel((x, 9), GREEN)
    path = tmp_path / 'stripes.png'
    img.save(path)
    return path


class TestRegistry:
    def test_discovers_all_techniques(self) -> None:
        assert set(all_techniques()) == {'all', 'distinct', 'swatches', 'top'}

    def test_unknown_technique(self) -> None:
        with pytest.raises(KeyError, match='Unknown technique'):
            get('kmeans')


class TestTop:
    def test_json_ranking(self, stripes: Path, capsys: pytest.CaptureFixture) -> None:
        code, out, _ = _run(['top', str(stripes), '--json'], capsys)
        assert code == 0
        data = json.loads(out)
        assert data['dimensions'] == {'width': 10, 'height': 10}
        colours = data['techniques']['top']['colours']
        assert [(c['hex'], c['count']) for c in colours] == [('#FF0000', 60), ('#0000FF', 30), ('#00FF00', 10)]
        assert colours[0]['rgb'] == 'RGB(255, 0, 0)'
        assert colours[0]['pct'] == 60.0

    def test_top_limits_result(self, stripes: Path, capsys: pytest.CaptureFixture) -> None:
        _, out, _ = _run(['top', str(stripes), '-n', '2', '-j'], capsys)
        assert len(json.loads(out)['techniques']['top']['colours']) == 2

    def test_top_zero(self, stripes: Path, capsys: pytest.CaptureFixture) -> None:
        code, out, _ = _run(['top', str(stripes), '--top', '0'], capsys)
        assert code == 0
        assert '(no colours)' in out

    def test_text_output(self, stripes: Path, capsys: pytest.CaptureFixture) -> None:
        _, out, _ = _run(['top', str(stripes)], capsys)
        assert 'Top 20 Colours' in out
        assert '#FF0000' in out
        assert 'RGB(0, 0, 255)' in out
        assert 'Count: 30 pixels (30.0%)' in out

    def test_top_from_env(self, stripes: Path, capsys: pytest.CaptureFixture, tmp_path: Path) -> None:
        (tmp_path / '.env').write_text('SWATCH_TOP_N=1\n')
        _, out, err = _run(['top', str(stripes), '--json'], capsys)
        assert 'loaded' in err
        assert len(json.loads(out)['techniques']['top']['colours']) == 1
        # load_env writes straight into os.environ
        os.environ.pop('SWATCH_TOP_N', None)

    def test_negative_top_rejected(self, stripes: Path, capsys: pytest.CaptureFixture) -> None:
        code, _, err = _run(['top', str(stripes), '--top', '-1'], capsys)
        assert code == 2
        assert 'must be >= 0' in err


class TestAlpha:
    @pytest.fixture
    def translucent(self, tmp_path: Path) -> Path:
        img = Image.new('RGBA', (4, 1), (10, 20, 30, 255))
        img.putpixel((0, 0), (10, 20, 30, 100))
        path = tmp_path / 'translucent.png'
        img.save(path)
        return path

    def test_default_merges_alpha(self, translucent: Path, capsys: pytest.CaptureFixture) -> None:
        _, out, _ = _run(['top', str(translucent), '-j'], capsys)
        colours = json.loads(out)['techniques']['top']['colours']
        assert [(c['hex'], c['count']) for c in colours] == [('#0A141E', 4)]
        assert 'a' not in colours[0]

    def test_alpha_flag_splits(self, translucent: Path, capsys: pytest.CaptureFixture) -> None:
        _, out, _ = _run(['top', str(translucent), '--alpha', '-j'], capsys)
        colours = json.loads(out)['techniques']['top']['colours']
        assert [(c['a'], c['count']) for c in colours] == [(255, 3), (100, 1)]

    def test_no_alpha_overrides_env(
        self, translucent: Path, capsys: pytest.CaptureFixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv('SWATCH_INCLUDE_ALPHA', '1')
        _, out, _ = _run(['top', str(translucent), '-j'], capsys)
        assert len(json.loads(out)['techniques']['top']['colours']) == 2
        _, out, _ = _run(['top', str(translucent), '--no-alpha', '-j'], capsys)
        assert [c['count'] for c in json.loads(out)['techniques']['top']['colours']] == [4]


class TestDistinct:
    def test_counts(self, stripes: Path, capsys: pytest.CaptureFixture) -> None:
        _, out, _ = _run(['distinct', str(stripes), '-j'], capsys)
        data = json.loads(out)['techniques']['distinct']
        assert data == {'total': 100, 'distinct': 3, 'dominant': '#FF0000', 'dominant_pct': 60.0}


class TestSwatches:
    def test_writes_sheet(self, stripes: Path, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        out_dir = tmp_path / 'out'
        code, out, _ = _run(['swatches', str(stripes), '--out', str(out_dir), '-j'], capsys)
        assert code == 0
        data = json.loads(out)['techniques']['swatches']
        assert data['rows'] == 3
        sheet = Image.open(data['file'])
        assert sheet.format == 'PNG'
        assert sheet.height == 3 * 40

    def test_requires_out(self, stripes: Path, capsys: pytest.CaptureFixture) -> None:
        _, out, _ = _run(['swatches', str(stripes), '-j'], capsys)
        assert json.loads(out)['techniques']['swatches'] == {'error': '--out directory required'}


class TestAll:
    def test_without_out_skips_swatches(self, stripes: Path, capsys: pytest.CaptureFixture) -> None:
        _, out, _ = _run(['all', str(stripes), '-j'], capsys)
        assert set(json.loads(out)['techniques']) == {'distinct', 'top'}

    def test_with_out(self, stripes: Path, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        _, out, _ = _run(['all', str(stripes), '-o', str(tmp_path / 'o'), '-j'], capsys)
        assert set(json.loads(out)['techniques']) == {'distinct', 'swatches', 'top'}
        assert (tmp_path / 'o' / 'swatches.png').is_file()


class TestPaste:
    def test_reads_clipboard(self, capsys: pytest.CaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(ImageGrab, 'grabclipboard', lambda: Image.new('RGB', (3, 3), GREEN))
        _, out, _ = _run(['top', '--paste', '-j'], capsys)
        data = json.loads(out)
        assert data['source'] == '<clipboard>'
        assert data['techniques']['top']['colours'][0]['count'] == 9

    def test_empty_clipboard_is_error(self, capsys: pytest.CaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(ImageGrab, 'grabclipboard', lambda: None)
        code, _, err = _run(['top', '--paste'], capsys)
        assert code == 1
        assert err.startswith('Error:')


class TestErrors:
    def test_missing_image(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        code, out, err = _run(['top', str(tmp_path / 'nope.png')], capsys)
        assert code == 1
        assert out == ''
        assert 'image not found' in err

    def test_no_image_no_paste(self, capsys: pytest.CaptureFixture) -> None:
        code, _, err = _run(['top'], capsys)
        assert code == 1
        assert '--paste' in err

    def test_no_technique(self, capsys: pytest.CaptureFixture) -> None:
        code, _, _ = _run([], capsys)
        assert code == 1


class TestHelp:
    def test_lists_techniques(self, capsys: pytest.CaptureFixture) -> None:
        _, out, _ = _run(['help'], capsys)
        for name in ('all', 'distinct', 'swatches', 'top'):
            assert name in out

    def test_technique_doc(self, capsys: pytest.CaptureFixture) -> None:
        _, out, _ = _run(['help', 'top'], capsys)
        assert out.startswith('Rank the N most frequent exact colours')

    def test_unknown(self, capsys: pytest.CaptureFixture) -> None:
        code, _, err = _run(['help', 'bogus'], capsys)
        assert code == 1
        assert 'Unknown technique' in err


class TestFormatText:
    def test_empty_image_header(self) -> None:
        report = Report(source='blank.png', image_width=0, image_height=0)
        report.add('top', {'top_n': 20, 'colours': []})
        text = format_text(report)
        assert text.startswith('swatch-tool: blank.png (0×0, 0 pixels)')
        assert '(no colours)' in text

    def test_alpha_header(self) -> None:
        report = Report(source='x.png', image_width=1, image_height=1, include_alpha=True)
        assert 'alpha counted' in format_text(report)
