"""Soft expectations: failures are recorded and the script keeps going."""

from loadassert import expect, iteration


def default():
    expect.soft(True).to_be(True)

    # Fails, but the iteration continues
    expect.soft("sun").to_be_undefined()

    expect.soft(10).to_be_close_to(10.2, 0.1)

    # Also runs, and also fails
    expect.soft(1).to_equal(2)


if __name__ == "__main__":
    with iteration() as it:
        default()
    print(f"{it.state.value}, had_soft_failure={it.had_soft_failure}")
    for check in it.checks:
        print(f"  FAIL {check.name}")
