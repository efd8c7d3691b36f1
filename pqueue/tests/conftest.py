from faker import Faker
import pytest

from pqueue.minheap import MinHeap
from pqueue.priority_queue import PriorityQueue
from pqueue.settings import QUEUE_SETTINGS


fake = Faker()
Faker.seed(1234)


@pytest.fixture
def names():
    return fake.words(nb=12, unique=True)


@pytest.fixture
def heap():
    return MinHeap()


@pytest.fixture
def queue():
    return PriorityQueue()


@pytest.fixture
def strict_queue():
    return PriorityQueue(strict=True)


@pytest.fixture
def filled_queue(names):
    q = PriorityQueue()
    for priority, name in zip([5, 1, 3, 2, 4], names):
        q.insert(priority, name)
    return q


@pytest.fixture
def strict_settings(mocker):
    mocker.patch.dict(QUEUE_SETTINGS, {'STRICT': True})