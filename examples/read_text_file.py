from collections import Counter

from dumpogn.connections import RawOGNTextFile
from dumpogn.messages import OgnMessageType

if __name__ == '__main__':
    filename = 'tests/data/input/capture.txt'
    raw_text_file = RawOGNTextFile(filename)

    messages = []
    raw_text_file.consume(messages.append)

    traffic_reports = [
        message for message in messages if message.type == OgnMessageType.traffic_report
    ]
    aircraft = Counter(message.source_id for message in traffic_reports)

    print(f'number of messages: {len(messages)}')
    print(f'number of traffic reports: {len(traffic_reports)} from {len(aircraft)} aircraft')
    print(f'maximum altitude (m): {max(message.altitude for message in traffic_reports)}')
