"""Hard expectations: same fail-fast behaviour as assert_, richer messages."""

from loadassert import expect, iteration


def default():
    expect(True).to_be(True)

    # 10.2 - 10 = 0.2 is below 10 ** -0.1
    expect(10).to_be_close_to(10.2, 0.1)

    # Fails and aborts, logging:
    #
    #   test aborted: Expected value 'sun' to be undefined
    #
    #     Expected: undefined
    #     Received: 'sun'
    #     At: examples/expect_example.py:19 in default
    expect("sun").to_be_undefined()


if __name__ == "__main__":
    with iteration() as it:
        default()
    print(f"{it.state.value}, exit code {it.exit_code}")
