from collections import Counter
from dataclasses import replace
from typing import Dict, List, Optional

import numpy as np
import streamlit as st
from st_keyup import st_keyup  # type: ignore

from ghost_chase.actions import GymAction
from ghost_chase.config import ChaseConfig, make_initial_state
from ghost_chase.gym_env import GhostChaseEnv, ObsType
from ghost_chase.levels.generator import DEFAULT_WALL_PERCENTAGE
from ghost_chase.renderer.text import render_initial_path

st.set_page_config(layout="wide", page_title="Ghost Chase")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def get_config_from_widgets() -> ChaseConfig:
    config: ChaseConfig = st.session_state.get("config", ChaseConfig())
    generated = st.toggle("Generated level", value=config.generated)
    width = st.slider("Width", 5, 31, config.width, disabled=not generated)
    height = st.slider("Height", 5, 31, config.height, disabled=not generated)
    wall_percentage = st.slider(
        "Wall percentage",
        0.0,
        1.0,
        config.wall_percentage if generated else DEFAULT_WALL_PERCENTAGE,
        disabled=not generated,
    )
    seed = st.number_input("Seed", value=config.seed or 0, step=1, disabled=not generated)
    return replace(
        config,
        generated=generated,
        width=width,
        height=height,
        wall_percentage=wall_percentage,
        seed=int(seed),
    )


def make_env_and_reset(config: ChaseConfig) -> GhostChaseEnv:
    env = GhostChaseEnv(
        render_mode="texture",
        render_resolution=config.render_resolution,
        initial_state_fn=lambda: make_initial_state(config),
    )
    obs, info = env.reset()
    st.session_state["env"] = env
    st.session_state["obs"] = obs
    st.session_state["info"] = info
    st.session_state["total_reward"] = 0.0
    st.session_state["game_over"] = False
    return env


def get_keyboard_action() -> Optional[GymAction]:
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="chase_key_input",
            placeholder="Type: WASD to move pac-man, q to wait",
        )
        or ""
    )
    prev_value: str = st.session_state.get("chase_key_input_prev", "")
    st.session_state["chase_key_input_prev"] = value
    if value != prev_value:
        new_values: List[str] = list((Counter(value) - Counter(prev_value)).elements())
        if not new_values:
            return None
        key_map: Dict[str, GymAction] = {
            "w": GymAction.UP,
            "s": GymAction.DOWN,
            "a": GymAction.LEFT,
            "d": GymAction.RIGHT,
            "q": GymAction.WAIT,
        }
        return key_map.get(new_values[-1])
    return None


def do_action(env: GhostChaseEnv, action: GymAction) -> None:
    if st.session_state.get("game_over"):
        return
    obs, reward, terminated, truncated, info = env.step(np.int64(action))
    st.session_state["obs"] = obs
    st.session_state["info"] = info
    st.session_state["total_reward"] = float(st.session_state["total_reward"]) + reward
    st.session_state["game_over"] = terminated or truncated


# --------- Main App ---------

tab_game, tab_config = st.tabs(["Game", "Config"])

with tab_config:
    new_config = get_config_from_widgets()
    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = new_config
        make_env_and_reset(new_config)

with tab_game:
    if "config" not in st.session_state:
        st.session_state["config"] = ChaseConfig()
    if "env" not in st.session_state:
        make_env_and_reset(st.session_state["config"])

    left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

    with right_col:
        env: GhostChaseEnv = st.session_state["env"]
        if st.button("🔁 Restart", key="restart_btn", use_container_width=True):
            env = make_env_and_reset(st.session_state["config"])

        _, up_col, _ = st.columns([1, 1, 1])
        with up_col:
            if st.button("⬆️", key="up_btn", use_container_width=True):
                do_action(env, GymAction.UP)
        left_btn, down_btn, right_btn = st.columns([1, 1, 1])
        with left_btn:
            if st.button("⬅️", key="left_btn", use_container_width=True):
                do_action(env, GymAction.LEFT)
        with down_btn:
            if st.button("⬇️", key="down_btn", use_container_width=True):
                do_action(env, GymAction.DOWN)
        with right_btn:
            if st.button("➡️", key="right_btn", use_container_width=True):
                do_action(env, GymAction.RIGHT)
        if st.button("⏳ Wait", key="wait_btn", use_container_width=True):
            do_action(env, GymAction.WAIT)

        action: Optional[GymAction] = get_keyboard_action()
        if action is not None:
            do_action(env, action)

    with left_col:
        obs: ObsType = st.session_state["obs"]
        info = obs["info"]
        st.metric("Turn", info["turn"])
        st.metric("Distance", info["distance"] if info["distance"] >= 0 else "∞")
        st.metric("Total reward", st.session_state["total_reward"])
        if env.state is not None:
            st.text("Initial path:\n" + render_initial_path(env.state))
        if st.session_state["game_over"]:
            st.error("Caught!" if env.state is not None and env.state.caught else "Time up!")

    with middle_col:
        st.image(st.session_state["obs"]["image"], use_container_width=True)
