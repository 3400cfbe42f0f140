from hamcrest import all_of, assert_that, contains_string, empty, equal_to, instance_of, is_, is_not


def assert_equals(actual, expected, reason=""):
    assert_that(actual, equal_to(expected), reason)


def assert_contains(actual, substring, reason=""):
    # contains_string treats a non-str actual as a mismatch, not a TypeError
    assert_that(actual, contains_string(substring), reason)


def assert_is(actual, expected, reason=""):
    assert_that(actual, is_(expected), reason)


def assert_non_empty_string(actual, reason=""):
    assert_that(actual, all_of(instance_of(str), is_not(empty())), reason)


def assert_status(response, expected, reason=""):
    """Status check that shows the body when it fails."""
    assert_is(
        response.status_code,
        expected,
        reason or f"{response.status_line} from {response.url}. Body: {response.text[:500]}",
    )
