"""Tests for the Normal/Insert transition tables."""

import pytest

from termedit.keyboard import KeyEvent, KeyType
from termedit.modes import Action, Mode, Transition, transition


def key(value, key_type=KeyType.REGULAR):
    return KeyEvent(key_type=key_type, value=value, raw=value)


def special(value):
    return key(value, KeyType.SPECIAL)


@pytest.mark.parametrize("event,action", [
    (special('left'), Action.MOVE_LEFT),
    (key('h'), Action.MOVE_LEFT),
    (special('right'), Action.MOVE_RIGHT),
    (key('l'), Action.MOVE_RIGHT),
    (special('down'), Action.MOVE_DOWN),
    (key('j'), Action.MOVE_DOWN),
    (special('up'), Action.MOVE_UP),
    (key('k'), Action.MOVE_UP),
    (special('tab'), Action.SAVE),
])
def test_normal_mode_bindings(event, action):
    assert transition(Mode.NORMAL, event) == Transition(Mode.NORMAL, action)


def test_escape_in_normal_exits():
    step = transition(Mode.NORMAL, special('escape'))
    assert step.action == Action.EXIT
    assert step.mode == Mode.NORMAL


def test_i_enters_insert_mode():
    assert transition(Mode.NORMAL, key('i')) == Transition(Mode.INSERT)


@pytest.mark.parametrize("event", [key('x'), key('q'), key(' '), special('enter'),
                                   special('backspace'), key('c', KeyType.CTRL)])
def test_unbound_normal_keys_are_noops(event):
    assert transition(Mode.NORMAL, event) == Transition(Mode.NORMAL)


def test_escape_in_insert_returns_to_normal():
    step = transition(Mode.INSERT, special('escape'))
    assert step == Transition(Mode.NORMAL)
    assert step.action is None


@pytest.mark.parametrize("value,action", [
    ('left', Action.MOVE_LEFT),
    ('right', Action.MOVE_RIGHT),
    ('up', Action.MOVE_UP),
    ('down', Action.MOVE_DOWN),
    ('backspace', Action.REMOVE_CHAR),
    ('enter', Action.NEW_LINE),
])
def test_insert_mode_special_keys(value, action):
    assert transition(Mode.INSERT, special(value)) == Transition(Mode.INSERT, action)


@pytest.mark.parametrize("ch", ['a', 'h', 'j', 'i', ' ', '~'])
def test_printable_keys_type_in_insert_mode(ch):
    assert transition(Mode.INSERT, key(ch)) == Transition(Mode.INSERT, Action.INSERT_CHAR)


@pytest.mark.parametrize("event", [special('tab'), key('s', KeyType.CTRL), key('f', KeyType.ALT)])
def test_non_printable_insert_keys_are_noops(event):
    assert transition(Mode.INSERT, event) == Transition(Mode.INSERT)


@pytest.mark.parametrize("mode", list(Mode))
def test_no_key_keeps_state(mode):
    assert transition(mode, None) == Transition(mode)
