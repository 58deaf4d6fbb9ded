import math

from dsakit.avl import Leaderboard, Player, main

PLAYERS = [(101, 50), (102, 70), (103, 30), (104, 90), (105, 60), (106, 91)]


def _board(players=PLAYERS):
    board = Leaderboard()
    for player_id, score in players:
        board.insert(player_id, score)
    return board


def test_entries_sorted_by_score():
    board = _board()
    expected = [Player(pid, s) for pid, s in sorted(PLAYERS, key=lambda p: p[1])]
    assert board.entries() == expected


def test_duplicate_score_keeps_first_player():
    board = Leaderboard()
    board.insert(1, 10)
    board.insert(2, 10)
    assert board.entries() == [Player(1, 10)]


def test_delete_removes_score():
    board = _board()
    board.delete(50)
    scores = [p.score for p in board.entries()]
    assert scores == sorted(s for _, s in PLAYERS if s != 50)
    assert Player(101, 50) not in board.entries()


def test_delete_missing_score_is_noop():
    board = _board()
    before = board.entries()
    board.delete(12345)
    assert board.entries() == before


def test_delete_everything_empties_board():
    board = _board()
    for _, score in PLAYERS:
        board.delete(score)
    assert board.entries() == []
    assert board.height() == 0
    assert board.render() == ""


def test_height_stays_logarithmic():
    board = Leaderboard()
    n = 500
    for i in range(n):
        board.insert(i, i)
    assert board.height() <= 1.4405 * math.log2(n + 2)
    for i in range(0, n, 2):
        board.delete(i)
    remaining = n // 2
    assert board.height() <= 1.4405 * math.log2(remaining + 2)
    assert [p.score for p in board.entries()] == list(range(1, n, 2))


def test_render_format():
    board = Leaderboard()
    board.insert(101, 50)
    board.insert(103, 30)
    assert board.render().splitlines() == [
        "Player ID: 103 | Score: 30",
        "Player ID: 101 | Score: 50",
    ]


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Updated Leaderboard:" in out
    assert out.count("Player ID: 101 | Score: 50\n") == 1
    assert out.count("Player ID: 106 | Score: 91\n") == 2