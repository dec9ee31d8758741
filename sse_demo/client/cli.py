"""
Terminal client for the counter stream
"""
import argparse
import logging
import os
import sys

from .event_source import EventSource

DEFAULT_STREAM_URL = os.environ.get('SSE_DEMO_STREAM_URL', 'http://localhost:8084/api/v1/stream')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='sse-demo-client',
        description='Print the messages of an SSE stream as a bullet list'
    )
    parser.add_argument('--url', default=DEFAULT_STREAM_URL,
                        help=f'stream endpoint (default: {DEFAULT_STREAM_URL})')
    parser.add_argument('--verbose', '-v', action='store_true', help='enable debug logging')
    return parser


def main(argv=None, out=None):
    """Consume the stream once; exit status is 0 when the server closed it normally"""
    args = build_parser().parse_args(argv)
    out = out or sys.stdout
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    failures = []

    def on_message(source, event):
        out.write(f'• {event.data}\n')
        out.flush()

    def on_error(source, error):
        if error is not None:
            failures.append(error)

    source = EventSource(args.url, on_message=on_message, on_error=on_error)
    try:
        source.run()
    except KeyboardInterrupt:
        source.close()
        return 130

    if failures:
        sys.stderr.write(f'stream failed: {failures[0]}\n')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
