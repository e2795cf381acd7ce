import json

import pytest

from scritto import cli


def _write(tmp_path, data, name="notes.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return str(path)


@pytest.fixture
def scaleData():
    return {"notes": [{"pitch": 60, "duration": [1, 2]},
                      {"pitch": 62, "duration": [1, 4]},
                      {"pitch": 64, "duration": [1, 4]}]}


def test_process(scaleData):
    assert cli.process(scaleData) == " %m. \n c4 ~ c4 d4 e4 |\n"


def test_process_computes_measures(scaleData):
    out = cli.process(scaleData, timesig="2/4")
    assert out == " %m. \n c4 ~ c4 |\n  %m. \n d4 e4 |\n"


def test_process_timesig_in_data(scaleData):
    scaleData["timesig"] = "2/4"
    assert cli.process(scaleData).count("%m.") == 2


def test_process_explicit_groupings(scaleData):
    scaleData["groupings"] = [{"type": "measure",
                               "contents": [{"type": "beat", "duration": [1, 2]}] * 2}]
    assert cli.process(scaleData) == " %m. \n c2 d4 e4 |\n"


def test_main_stdout(tmp_path, capsys, scaleData):
    path = _write(tmp_path, scaleData)
    assert cli.main([path]) == 0
    assert capsys.readouterr().out == " %m. \n c4 ~ c4 d4 e4 |\n"


def test_main_output_file(tmp_path, scaleData):
    path = _write(tmp_path, scaleData)
    outfile = tmp_path / "out.ly"
    assert cli.main([path, "-o", str(outfile), "--standalone", "--title", "Scale",
                     "-t", "4/4"]) == 0
    text = outfile.read_text()
    assert text.startswith("\\version")
    assert 'title = "Scale"' in text
    assert "\\time 4/4" in text
    assert "c4 ~ c4 d4 e4 |" in text


def test_main_not_enough_measures(tmp_path, capsys, scaleData):
    path = _write(tmp_path, scaleData)
    assert cli.main([path, "-t", "2/4", "-n", "1"]) == 1
    assert "error" in capsys.readouterr().err


@pytest.mark.parametrize("content", ["{", '{"foo": 1}', '{"notes": [{"type": "xx"}]}'])
def test_main_invalid_input(tmp_path, capsys, content):
    path = tmp_path / "bad.json"
    path.write_text(content)
    assert cli.main([str(path)]) == 1
    assert "scritto: error" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing.json")]) == 1


def test_main_standalone_subdivided_timesig(tmp_path, scaleData):
    path = _write(tmp_path, scaleData)
    outfile = tmp_path / "out.ly"
    assert cli.main([path, "-o", str(outfile), "--standalone", "-t", "5/8(3-2)"]) == 0
    text = outfile.read_text()
    assert "\\time 3,2 5/8" in text
    assert "(3-2)" not in text


def test_process_descend_from_config(restoreConfig):
    restoreConfig['controller.descendToLeaf'] = True
    data = {"notes": [{"pitch": 60, "duration": [1, 2]}],
            "groupings": [{"type": "region",
                           "contents": [{"type": "measure",
                                         "contents": [{"type": "beat", "duration": [1, 4]}] * 2}]}]}
    assert "c4 ~ c4" in cli.process(data)
    restoreConfig['controller.descendToLeaf'] = False
    assert "c2" in cli.process(data)
