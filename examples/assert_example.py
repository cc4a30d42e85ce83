"""Plain assertions: the first failure ends the iteration."""

from loadassert import assert_, assert_equals, iteration


def default():
    # A true condition lets the script carry on
    assert_(True is True, "True is expected to remain True")

    # assert_equals compares with strict equality, not deep equality
    assert_equals(1, 1, "1 is expected to equal 1")

    # A false condition aborts the iteration; nothing below it runs
    assert_("sun" == "moon", "sun is expected to be moon")
    assert_equals("sun", "moon", "sun is expected to be moon")


if __name__ == "__main__":
    for _ in range(3):
        with iteration() as it:
            default()
        print(f"{it.state.value}: {it.abort_message}")
