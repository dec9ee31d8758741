"""
Counter Stream Business Logic
"""
import time


class CounterStreamService:
    """Produces the counter values pushed to stream subscribers"""

    def __init__(self, count=10, interval=1.0, sleep=time.sleep):
        if count < 0:
            raise ValueError(f'count must be non-negative, got {count}')
        if interval < 0:
            raise ValueError(f'interval must be non-negative, got {interval}')
        self.count = count
        self.interval = interval
        self._sleep = sleep

    @classmethod
    def from_config(cls, config, sleep=time.sleep):
        return cls(count=config['STREAM_COUNT'],
                   interval=config['STREAM_INTERVAL'],
                   sleep=sleep)

    def iter_values(self):
        """Yield 0..count-1, waiting `interval` seconds between values

        There is no wait after the last value so the stream can close
        right after it.
        """
        for n in range(self.count):
            if n:
                self._sleep(self.interval)
            yield n
