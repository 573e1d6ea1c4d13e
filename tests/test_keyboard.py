from brickbreaker.keyboard import Key, Keyboard


def test_initially_nothing_is_down():
    kb = Keyboard()
    assert not any(kb.key_down(k) for k in Key)
    assert kb.quit is False


def test_key_down_after_update():
    kb = Keyboard()
    kb.update({Key.SPACE})
    assert kb.key_down(Key.SPACE)
    assert not kb.key_held(Key.SPACE)
    assert kb.key_pressed(Key.SPACE)


def test_key_held_on_following_frame():
    kb = Keyboard()
    kb.update({Key.SPACE})
    kb.update({Key.SPACE})
    assert kb.key_down(Key.SPACE)
    assert kb.key_held(Key.SPACE)
    assert not kb.key_pressed(Key.SPACE)


def test_release_clears_down_but_keeps_held():
    kb = Keyboard()
    kb.update({Key.A})
    kb.update(set())
    assert not kb.key_down(Key.A)
    assert kb.key_held(Key.A)


def test_quit_is_sticky():
    kb = Keyboard()
    kb.update(set(), quit_requested=True)
    kb.update(set())
    assert kb.quit is True


def test_keys_are_independent():
    kb = Keyboard()
    kb.update([Key.W, Key.D])
    assert kb.key_down(Key.W) and kb.key_down(Key.D)
    assert not kb.key_down(Key.S)