"""Thread drills: joining workers, sharing a counter and passing values."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass, field


def run_threads(count: int, delay: float) -> int:
    """Start count sleeping threads, wait for all of them, return how many finished."""
    if count < 0:
        raise ValueError("count must not be negative")

    def work(i: int) -> None:
        time.sleep(delay)
        print(f"thread {i} is complete")

    handles = [threading.Thread(target=work, args=(i,)) for i in range(count)]
    for handle in handles:
        handle.start()

    completed_threads = 0
    for handle in handles:
        handle.join()
        completed_threads += 1

    if completed_threads != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed_threads


@dataclass
class JobStatus:
    """A job counter shared between threads, guarded by its lock."""

    jobs_completed: int = 0
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


def count_jobs(count: int, delay: float) -> int:
    """Let count threads each record one finished job; return the total."""
    if count < 0:
        raise ValueError("count must not be negative")
    status = JobStatus()

    def work() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    handles = [threading.Thread(target=work) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        with status.lock:
            print(f"jobs completed {status.jobs_completed}")
    return status.jobs_completed


@dataclass
class JobQueue:
    """Ten values split into two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(job_queue: JobQueue, channel: queue.Queue, delay: float) -> threading.Thread:
    """Send both halves on channel from two threads, then None to close it.

    Returns the thread that puts None once both senders are done.
    """

    def send(values: list[int]) -> None:
        for value in values:
            print(f"sending {value}")
            channel.put(value)
            time.sleep(delay)

    senders = [
        threading.Thread(target=send, args=(job_queue.first_half,)),
        threading.Thread(target=send, args=(job_queue.second_half,)),
    ]
    for sender in senders:
        sender.start()

    def close() -> None:
        for sender in senders:
            sender.join()
        channel.put(None)

    closer = threading.Thread(target=close)
    closer.start()
    return closer


def receive_all(job_queue: JobQueue, delay: float) -> list[int]:
    """Receive every value sent for job_queue; raise if any went missing."""
    channel: queue.Queue = queue.Queue()
    closer = send_tx(job_queue, channel, delay)

    received = []
    while (value := channel.get()) is not None:
        print(f"Got: {value}")
        received.append(value)
    closer.join()

    print(f"total numbers received: {len(received)}")
    if len(received) != job_queue.length:
        raise RuntimeError(
            f"received {len(received)} values, expected {job_queue.length}"
        )
    return received