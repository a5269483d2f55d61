"""
Unit tests for the Gymnasium environment wrapper.
"""
import numpy as np

from minesweeper import BEGINNER, BoardConfig, MinesweeperEnv, make_vec_env


def make_env(**kwargs) -> MinesweeperEnv:
    return MinesweeperEnv(config=BoardConfig(8, 8, 10), **kwargs)


class TestEnvironment:
    """Test reset/step behavior."""

    def test_spaces(self) -> None:
        """Three commands per cell; observation matches the board."""
        env = make_env()
        assert env.action_space.n == 3 * 64
        assert env.observation_space.shape == (8, 8)

    def test_reset_returns_hidden_board(self) -> None:
        """A reset board is fully hidden."""
        env = make_env()
        obs, info = env.reset(seed=0)
        assert obs.shape == (8, 8)
        assert (obs == -1).all()
        assert info["game_state"] == "UNTOUCHED"
        assert info["valid_actions"] == 2 * 64

    def test_first_open_rewards(self) -> None:
        """First open is safe and rewarded."""
        env = make_env()
        env.reset(seed=5)
        obs, reward, terminated, truncated, info = env.step(4 * 8 + 4)
        assert reward in (1.0, 10.0)
        assert obs[4, 4] >= 0
        assert truncated is False
        assert terminated is (info["game_state"] == "WON")

    def test_same_seed_same_board(self) -> None:
        """Seeding reset makes placement reproducible."""
        env = make_env()
        env.reset(seed=3)
        first, *_ = env.step(0)
        env.reset(seed=3)
        second, *_ = env.step(0)
        assert np.array_equal(first, second)

    def test_flag_and_noop_rewards(self) -> None:
        """Flags earn nothing; repeated no-ops are penalized."""
        env = make_env()
        env.reset(seed=1)
        flag_action = 64 + 10
        clear_action = 128 + 10
        _, reward, *_ = env.step(clear_action)
        assert reward == -0.1
        obs, reward, *_ = env.step(flag_action)
        assert reward == 0.0
        assert obs[1, 2] == -2
        _, reward, *_ = env.step(10)
        assert reward == -0.1

    def test_action_mask_tracks_board(self) -> None:
        """Flagged cells can be cleared but not opened."""
        env = make_env()
        env.reset(seed=1)
        env.step(64 + 10)
        mask = env.get_action_mask()
        assert not mask[10]
        assert mask[64 + 10]
        assert mask[128 + 10]
        assert not mask[128 + 11]

    def test_render_ansi(self) -> None:
        """ANSI render returns the text snapshot."""
        env = make_env(render_mode="ansi")
        env.reset(seed=0)
        assert env.render() == ("#" * 8 + "\n") * 8


class TestVectorEnvironment:
    """Test the vectorized factory."""

    def test_vector_reset_and_step(self) -> None:
        """Boards run side by side and batch their observations."""
        envs = make_vec_env(2, BEGINNER)
        try:
            obs, _ = envs.reset(seed=0)
            assert obs.shape == (2, 9, 9)
            assert (obs == -1).all()

            obs, rewards, terminated, truncated, _ = envs.step(
                np.array([40, 81 + 40])
            )
            # A finished board may already be auto-reset
            if not terminated[0]:
                assert obs[0, 4, 4] >= 0
            assert obs[1, 4, 4] == -2
            assert rewards[0] in (1.0, 10.0)
            assert rewards[1] == 0.0
            assert not truncated.any()
        finally:
            envs.close()
