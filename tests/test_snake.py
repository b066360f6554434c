"""Tests for Snake records and the SnakeRegistry."""

from snake_sim.snake import Snake, SnakeRegistry


class TestSnake:
    def test_unresolved_defaults(self):
        snake = Snake(tail_row=3, tail_col=4)
        assert snake.tail == (3, 4)
        assert snake.head == (-1, -1)
        assert not snake.live

    def test_to_dict(self):
        snake = Snake(1, 2, 1, 4, True)
        assert snake.to_dict() == {
            "tail_row": 1,
            "tail_col": 2,
            "head_row": 1,
            "head_col": 4,
            "live": True,
        }


class TestSnakeRegistry:
    def test_add_returns_index(self):
        snakes = SnakeRegistry()
        assert snakes.add(Snake(0, 0)) == 0
        assert snakes.add(Snake(1, 1)) == 1
        assert len(snakes) == 2
        assert snakes[1].tail == (1, 1)

    def test_iteration_keeps_insertion_order(self):
        snakes = SnakeRegistry()
        for row in (5, 2, 7):
            snakes.add(Snake(row, 0))
        assert [s.tail_row for s in snakes] == [5, 2, 7]

    def test_live_indices(self):
        snakes = SnakeRegistry()
        snakes.add(Snake(0, 0, 0, 1, True))
        snakes.add(Snake(1, 0, 1, 1, False))
        snakes.add(Snake(2, 0, 2, 1, True))
        assert snakes.live_indices() == [0, 2]

    def test_dead_snakes_keep_their_index(self):
        snakes = SnakeRegistry()
        snakes.add(Snake(0, 0, 0, 1, True))
        snakes.add(Snake(1, 0, 1, 1, True))
        snakes[0].live = False
        assert len(snakes) == 2
        assert snakes[1].tail == (1, 0)

    def test_to_dict(self):
        snakes = SnakeRegistry()
        snakes.add(Snake(0, 0, 0, 1, True))
        assert snakes.to_dict() == [
            {"tail_row": 0, "tail_col": 0, "head_row": 0, "head_col": 1, "live": True},
        ]
