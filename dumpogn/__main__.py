from collections import Counter
from datetime import datetime, timedelta
from pathlib import Path
from typing import List

import humanize
import typer

from dumpogn.configuration.run import RunConfiguration
from dumpogn.connections.base import MessageSource
from dumpogn.messages import OgnMessage, OgnMessageType
from dumpogn.messages.writer import FORMATTERS, RawCaptureWriter
from dumpogn.utilities import get_logger

LOGGER = get_logger('dumpogn')


def dumpogn_command(
    configuration_filename: Path = typer.Argument(None),
    lat: float = None,
    lon: float = None,
    radius: int = None,
    server: str = None,
    port: int = None,
    callsign: str = None,
    callsigns: str = None,
    sbs1: bool = False,
    geojson: bool = False,
    output_filename: Path = None,
    log_filename: Path = None,
    replay: List[Path] = None,
):
    """
    print traffic and weather reports from the Open Glider Network

    :param configuration_filename: configuration file in YAML format
    :param lat: latitude of the receive filter center
    :param lon: longitude of the receive filter center
    :param radius: receive filter radius in kilometers
    :param server: hostname of the APRS-IS server
    :param port: port of the APRS-IS server
    :param callsign: callsign to log in with
    :param callsigns: comma-separated source IDs to output
    :param sbs1: output SBS-1 BaseStation lines instead of raw sentences
    :param geojson: output GeoJSON features instead of raw sentences
    :param output_filename: file to capture received sentences to
    :param log_filename: file to write log messages to
    :param replay: replay captured sentences from text files instead of connecting to a server
    """

    program_start_time = datetime.now()

    if configuration_filename is not None:
        configuration = RunConfiguration.from_file(configuration_filename)
    else:
        configuration = RunConfiguration()

    if lat is not None:
        configuration['filter']['latitude'] = lat
    if lon is not None:
        configuration['filter']['longitude'] = lon
    if radius is not None:
        configuration['filter']['radius'] = radius
    if server is not None:
        configuration['server']['hostname'] = server
    if port is not None:
        configuration['server']['port'] = port
    if callsign is not None:
        configuration['callsign'] = callsign
    if callsigns is not None:
        configuration['callsigns'] = [callsigns]
    if sbs1 and geojson:
        raise typer.BadParameter('choose only one of --sbs1 and --geojson')
    elif sbs1:
        configuration['output'] = {**configuration['output'], 'format': 'sbs1'}
    elif geojson:
        configuration['output'] = {**configuration['output'], 'format': 'geojson'}
    if output_filename is not None:
        configuration['output'] = {**configuration['output'], 'filename': output_filename}
    if log_filename is not None:
        configuration['log'] = {'filename': log_filename}
    if replay is not None and len(replay) > 0:
        configuration['text']['locations'] = list(replay)

    if configuration['log']['filename'] is not None:
        get_logger(LOGGER.name, log_filename=configuration['log']['filename'])
        LOGGER.info(f'logging to "{configuration["log"]["filename"]}"')

    connections = message_sources(configuration)

    formatter = FORMATTERS[configuration['output']['format']]()
    LOGGER.debug(f'formatting messages with {formatter}')

    if configuration['output']['filename'] is not None:
        capture = RawCaptureWriter(configuration['output']['filename'])
        LOGGER.info(f'capturing received sentences to "{capture.filename}"')
    else:
        capture = None

    message_counts = Counter()

    def output_message(message: OgnMessage):
        message_counts[message.type] += 1
        if message.type == OgnMessageType.unknown:
            LOGGER.debug(f'could not decode "{message.sentence}"')
        if capture is not None:
            capture.write(message)
        output = formatter.format(message)
        if len(output) > 0:
            typer.echo(output)

    exit_code = 0
    try:
        for connection in connections:
            with connection:
                LOGGER.info(f'receiving messages from {connection.location}')
                connection.consume(output_message)
    except ConnectionError as error:
        LOGGER.error(f'{error.__class__.__name__} - {error}')
        exit_code = 1
    except KeyboardInterrupt:
        LOGGER.info('interrupted')
    finally:
        if capture is not None:
            capture.close()
        LOGGER.info(message_summary(message_counts, datetime.now() - program_start_time))

    if exit_code != 0:
        raise typer.Exit(code=exit_code)


def message_sources(configuration: RunConfiguration) -> List[MessageSource]:
    """
    replay files from the `text` section if given, otherwise a connection to the APRS-IS server

    :param configuration: run configuration
    :return: message sources to read in order
    """

    callsigns = configuration['callsigns']

    if len(configuration['text']['locations']) > 0:
        return configuration['text'].message_sources(callsigns)

    latitude = configuration['filter']['latitude']
    longitude = configuration['filter']['longitude']
    if latitude is None or longitude is None:
        raise typer.BadParameter(
            'a receive filter needs both latitude and longitude', param_hint="'--lat' / '--lon'"
        )

    connection = configuration['server'].message_source(
        latitude,
        longitude,
        configuration['filter']['radius'],
        callsign=configuration['callsign'],
        callsigns=callsigns,
    )
    if configuration['callsign'] is None:
        LOGGER.info(f'using read-only callsign {connection.callsign}')

    return [connection]


def message_summary(message_counts: Counter, duration: timedelta) -> str:
    """ one-line summary of the number of messages of each type received over the given duration """

    total = sum(message_counts.values())
    summary = f'received {humanize.intcomma(total)} messages in {humanize.precisedelta(duration)}'
    if total > 0:
        counts = ', '.join(
            f'{humanize.intcomma(count)} {message_type.value}'
            for message_type, count in message_counts.most_common()
        )
        summary += f' ({counts})'
    return summary


def main():
    typer.run(dumpogn_command)


if __name__ == '__main__':
    main()
