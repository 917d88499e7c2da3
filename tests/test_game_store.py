"""Tests for the in-memory game store and its shared default instance."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from wordle_master.errors import GameNotFoundError, InvalidIdError
from wordle_master.models.game import Attempt, Game, GameStatus, LetterHint
from wordle_master.services import game_store as game_store_module
from wordle_master.services.game_store import GameStore, get_game_store, reset_game_store


def make_game(game_id='game-1', secret='blank'):
    return Game(id=game_id, secret_word=secret)


def test_save_then_load_returns_equal_record(store):
    game = make_game()
    game.attempts.append(Attempt('crane', True, [LetterHint.GREY] * 4 + [LetterHint.GREEN]))

    store.save(game.id, game)

    assert store.load(game.id) == game


def test_save_overwrites_existing_record(store):
    store.save('game-1', make_game(secret='blank'))
    store.save('game-1', make_game(secret='crane'))

    assert store.load('game-1').secret_word == 'crane'


def test_load_unknown_id_returns_none(store):
    assert store.load('missing') is None


def test_stored_record_is_isolated_from_caller(store):
    game = make_game()
    store.save(game.id, game)

    game.status = GameStatus.WON
    loaded = store.load(game.id)
    loaded.attempts.append(Attempt('hello', True, []))

    reloaded = store.load(game.id)
    assert reloaded.status == GameStatus.IN_PLAY
    assert reloaded.attempts == []


def test_exists(store):
    assert store.exists('game-1') is False
    store.save('game-1', make_game())
    assert store.exists('game-1') is True


def test_delete(store):
    store.save('game-1', make_game())
    store.delete('game-1')

    assert store.exists('game-1') is False
    assert store.load('game-1') is None


def test_delete_unknown_id_raises_not_found(store):
    with pytest.raises(GameNotFoundError):
        store.delete('missing')


@pytest.mark.parametrize('game_id', ['', '   ', None])
def test_empty_id_rejected_everywhere(store, game_id):
    with pytest.raises(InvalidIdError):
        store.save(game_id, make_game())
    with pytest.raises(InvalidIdError):
        store.load(game_id)
    with pytest.raises(InvalidIdError):
        store.exists(game_id)
    with pytest.raises(InvalidIdError):
        store.delete(game_id)


def test_purge_all(store):
    for i in range(5):
        store.save(f'game-{i}', make_game(f'game-{i}'))
    assert store.count() == 5

    store.purge_all()

    assert store.count() == 0
    assert store.load('game-0') is None
    store.purge_all()  # purging an empty store is fine


def test_concurrent_saves_and_loads_do_not_mix(store):
    ids = [f'game-{i}' for i in range(200)]

    def save(game_id):
        store.save(game_id, make_game(game_id, secret=game_id[-5:].rjust(5, 'x')))

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(save, ids))

    with ThreadPoolExecutor(max_workers=16) as pool:
        loaded = list(pool.map(store.load, ids))

    for game_id, game in zip(ids, loaded):
        assert game.id == game_id
        assert game.secret_word == game_id[-5:].rjust(5, 'x')
    assert store.count() == len(ids)


def test_readers_and_writers_interleave_safely(store):
    store.save('shared', make_game('shared'))
    errors = []

    def reader():
        for _ in range(200):
            game = store.load('shared')
            if game is None or game.id != 'shared':
                errors.append(game)

    def writer():
        for i in range(200):
            store.save('shared', make_game('shared', secret=f'word{i % 10}'))

    threads = [threading.Thread(target=reader) for _ in range(4)] + [threading.Thread(target=writer) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []


class TestSharedStore:

    def setup_method(self):
        reset_game_store()

    def teardown_method(self):
        reset_game_store()

    def test_same_instance_returned(self):
        assert get_game_store() is get_game_store()

    def test_reset_creates_new_instance(self):
        first = get_game_store()
        first.save('game-1', make_game())

        reset_game_store()
        second = get_game_store()

        assert second is not first
        assert second.load('game-1') is None

    def test_concurrent_first_access_creates_one_store(self, monkeypatch):
        created = []
        original_init = GameStore.__init__

        def counting_init(self):
            created.append(self)
            original_init(self)

        monkeypatch.setattr(game_store_module.GameStore, '__init__', counting_init)

        barrier = threading.Barrier(16)

        def first_access():
            barrier.wait()
            return get_game_store()

        with ThreadPoolExecutor(max_workers=16) as pool:
            stores = list(pool.map(lambda _: first_access(), range(16)))

        assert len(created) == 1
        assert all(s is stores[0] for s in stores)
