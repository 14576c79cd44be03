import json

import aprslib
import pytest
import typer
from typer.testing import CliRunner

from dumpogn.__main__ import dumpogn_command
from tests import INPUT_DIRECTORY, OUTPUT_DIRECTORY
from tests.test_connections import FakeAPRSIS

CAPTURE_FILENAME = INPUT_DIRECTORY / 'capture.txt'


def output_lines(capsys) -> [str]:
    return capsys.readouterr().out.splitlines()


def test_replay(capsys):
    dumpogn_command(None, replay=[CAPTURE_FILENAME])

    lines = output_lines(capsys)
    assert len(lines) == 6
    assert lines[1].startswith('FLRDDE626>APRS')
    assert lines[-1] == 'INVALID MESSAGE FORMAT'


def test_replay_sbs1(capsys):
    dumpogn_command(None, replay=[CAPTURE_FILENAME], sbs1=True, callsigns='FLRDDE626,FNT08075C')

    lines = output_lines(capsys)
    assert len(lines) == 1
    assert lines[0].startswith('MSG,8,111,11111,DDE626,111111,')


def test_configuration_file(capsys):
    dumpogn_command(INPUT_DIRECTORY / 'configuration.yaml', replay=[CAPTURE_FILENAME])

    features = [json.loads(line) for line in output_lines(capsys)]
    assert [feature['properties']['source_id'] for feature in features] == [
        'FLRDDE626',
        'FNT08075C',
        'FLRDDA5BA',
    ]


def test_capture(capsys):
    filename = OUTPUT_DIRECTORY / 'test_cli_capture.txt'
    if filename.exists():
        filename.unlink()

    dumpogn_command(None, replay=[CAPTURE_FILENAME], callsigns='FNT08075C', output_filename=filename)

    assert len(output_lines(capsys)) == 1
    lines = filename.read_text(encoding='latin-1').splitlines()
    assert len(lines) == 1
    assert lines[0].endswith(': FNT08075C>OGNFNT,qAS,Hoernle2:/222245h4803.92N/00800.93E_292/005g010t030h01b65526 5.2dB')


def test_conflicting_formats():
    with pytest.raises(typer.BadParameter):
        dumpogn_command(None, replay=[CAPTURE_FILENAME], sbs1=True, geojson=True)


def test_missing_location():
    with pytest.raises(typer.BadParameter):
        dumpogn_command(None)


def test_missing_location_exit_code():
    app = typer.Typer()
    app.command()(dumpogn_command)

    result = CliRunner().invoke(app, ['--lat', '48.3537'])

    assert result.exit_code == 2


def test_server(capsys, monkeypatch):
    monkeypatch.setattr(FakeAPRSIS, 'instances', [])
    monkeypatch.setattr(aprslib, 'IS', FakeAPRSIS)

    dumpogn_command(None, lat=48.3537, lon=11.786, radius=75, callsign='DMP123456')

    server = FakeAPRSIS.instances[0]
    assert server.callsign == 'DMP123456'
    assert server.sent[0].startswith('user DMP123456 pass ')
    assert server.sent[0].endswith(' filter r/48.3537/11.7860/75 t/o\n')
    assert len(output_lines(capsys)) == 3


def test_server_disconnect(monkeypatch):
    monkeypatch.setattr(FakeAPRSIS, 'instances', [])
    monkeypatch.setattr(FakeAPRSIS, 'drop', True)
    monkeypatch.setattr(aprslib, 'IS', FakeAPRSIS)

    with pytest.raises(typer.Exit) as error:
        dumpogn_command(None, lat=48.3537, lon=11.786, server='localhost', port=10152)

    assert error.value.exit_code == 1
    assert FakeAPRSIS.instances[0].server == ('localhost', 10152)
