"""
Count calls to the generic (exact) evaluator.

This is a diagnostic aid for tests: it shows how often the floating point
filters fail and the slow path runs. The process-wide counter is used
unless a predicate is handed its own CallCounter.
"""
import threading


class CallCounter(object):
    def __init__(self):
        self._lock=threading.Lock()
        self._value=0

    def increment(self):
        with self._lock:
            self._value+=1

    def reset(self):
        with self._lock:
            self._value=0

    @property
    def value(self):
        with self._lock:
            return self._value

    def __repr__(self):
        return "CallCounter(%d)"%self.value


generic_calls=CallCounter()

def resolve(counter):
    if counter is None:
        return generic_calls
    return counter

def reset_generic_call_counter():
    generic_calls.reset()

def generic_call_count():
    return generic_calls.value
