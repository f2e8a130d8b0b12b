import pytest

from rustdrills.drills.iterators import (
    DivideByZero,
    DivisionError,
    NotDivisibleError,
    Progress,
    capitalize_first,
    capitalize_words_string,
    capitalize_words_vector,
    count_collection_for,
    count_collection_iterator,
    count_for,
    count_iterator,
    divide,
    factorial,
    favourite_fruits,
    list_of_results,
    result_with_list,
)


def get_map():
    return {
        "variables1": Progress.COMPLETE,
        "functions1": Progress.COMPLETE,
        "hashmap1": Progress.COMPLETE,
        "arc1": Progress.SOME,
        "as_ref_mut": Progress.NONE,
        "from_str": Progress.NONE,
    }


def get_vec_map():
    other = {
        "variables2": Progress.COMPLETE,
        "functions2": Progress.COMPLETE,
        "if1": Progress.COMPLETE,
        "from_into": Progress.NONE,
        "try_from_into": Progress.NONE,
    }
    return [get_map(), other]


def test_favourite_fruits_in_order():
    fruits = favourite_fruits()
    assert next(fruits) == "banana"
    assert next(fruits) == "custard apple"
    assert next(fruits) == "avocado"
    assert next(fruits) == "peach"
    assert next(fruits) == "raspberry"
    assert next(fruits, None) is None


def test_success():
    assert capitalize_first("hello") == "Hello"


def test_empty():
    assert capitalize_first("") == ""


def test_iterate_string_vec():
    assert capitalize_words_vector(["hello", "world"]) == ["Hello", "World"]


def test_iterate_into_string():
    assert capitalize_words_string(["hello", " ", "world"]) == "Hello World"


def test_divide_success():
    assert divide(81, 9) == 9


def test_not_divisible():
    with pytest.raises(NotDivisibleError) as info:
        divide(81, 6)
    assert info.value == NotDivisibleError(dividend=81, divisor=6)
    assert (info.value.dividend, info.value.divisor) == (81, 6)


def test_divide_by_0():
    with pytest.raises(DivideByZero):
        divide(81, 0)


def test_division_errors_share_a_base():
    with pytest.raises(DivisionError):
        divide(1, 0)


def test_divide_0_by_something():
    assert divide(0, 81) == 0


def test_result_with_list():
    assert result_with_list() == [1, 11, 1426, 3]


def test_list_of_results():
    assert list_of_results() == [1, 11, 1426, 3]


@pytest.mark.parametrize("num, expected", [(0, 1), (1, 1), (2, 2), (4, 24)])
def test_factorial(num, expected):
    assert factorial(num) == expected


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_count_complete():
    assert count_iterator(get_map(), Progress.COMPLETE) == 3


def test_count_equals_for():
    progress_map = get_map()
    for value in Progress:
        assert count_for(progress_map, value) == count_iterator(progress_map, value)


def test_count_collection_complete():
    assert count_collection_iterator(get_vec_map(), Progress.COMPLETE) == 6


def test_count_collection_equals_for():
    collection = get_vec_map()
    for value in Progress:
        assert count_collection_for(collection, value) == count_collection_iterator(
            collection, value
        )