from task_frontend.schemas.task import PageMetadata
from task_frontend.utils.flash import read_flash, redirect_with_flash
from task_frontend.utils.pagination import build_pagination
from task_frontend.utils.query import extract_task_search_params


def test_search_params_defaults() -> None:
    params = extract_task_search_params({})
    assert params.page == 0
    assert params.size == 20
    assert params.to_query_params() == {"page": 0, "size": 20}


def test_search_params_from_query() -> None:
    params = extract_task_search_params({
        "page": "2",
        "size": "10",
        "search": "  report ",
        "status": "COMPLETED",
        "dueDateFrom-day": "1",
        "dueDateFrom-month": "3",
        "dueDateFrom-year": "2024",
        "dueDateTo-day": "31",
        "dueDateTo-month": "3",
    })
    assert params.to_query_params() == {
        "page": 2,
        "size": 10,
        "search": "report",
        "status": "COMPLETED",
        "dueDateFrom": "2024-03-01T00:00:00",
    }


def test_search_params_invalid_numbers_fall_back() -> None:
    params = extract_task_search_params({"page": "abc", "size": "0", "search": "   ", "status": ""})
    assert params.to_query_params() == {"page": 0, "size": 20}

    params = extract_task_search_params({"page": "-3", "size": "-5"})
    assert (params.page, params.size) == (0, 20)


def _page(number: int, total_elements: int, size: int = 20) -> PageMetadata:
    return PageMetadata(
        size=size,
        number=number,
        totalElements=total_elements,
        totalPages=(total_elements + size - 1) // size,
    )


def test_pagination_middle_page_keeps_filters() -> None:
    query = [("search", "milk"), ("page", "1"), ("flashMessageText", "Task deleted successfully")]
    pagination = build_pagination(_page(1, 45), query)

    assert pagination["is_first"] is False
    assert pagination["is_last"] is False
    assert pagination["previous_url"] == "/?search=milk&page=0"
    assert pagination["next_url"] == "/?search=milk&page=2"
    assert [item["number"] for item in pagination["items"]] == [1, 2, 3]
    assert [item["current"] for item in pagination["items"]] == [False, True, False]
    assert pagination["start_item"] == 21
    assert pagination["end_item"] == 40


def test_pagination_last_page() -> None:
    pagination = build_pagination(_page(2, 45), [])
    assert pagination["is_last"] is True
    assert pagination["next_url"] is None
    assert pagination["previous_url"] == "/?page=1"
    assert (pagination["start_item"], pagination["end_item"]) == (41, 45)


def test_pagination_empty_result() -> None:
    pagination = build_pagination(_page(0, 0), [])
    assert pagination["is_first"] is True
    assert pagination["is_last"] is True
    assert pagination["previous_url"] is None
    assert pagination["next_url"] is None
    assert pagination["items"] == []
    assert (pagination["start_item"], pagination["end_item"]) == (0, 0)


def test_redirect_with_flash() -> None:
    response = redirect_with_flash("/", "Task deleted successfully")
    assert response.status_code == 303
    assert response.headers["location"] == "/?flashMessageText=Task+deleted+successfully&flashMessageType=success"

    response = redirect_with_flash("/?page=2", "Unable to save", kind="error")
    assert response.headers["location"] == "/?page=2&flashMessageText=Unable+to+save&flashMessageType=error"


def test_read_flash() -> None:
    assert read_flash({}) == {"flash_message_text": None, "flash_message_type": None}
    assert read_flash({"flashMessageText": "Saved"}) == {
        "flash_message_text": "Saved",
        "flash_message_type": "success",
    }


def test_pagination_page_past_the_end() -> None:
    pagination = build_pagination(_page(10, 45), [])
    assert pagination["is_last"] is True
    assert pagination["next_url"] is None
    assert (pagination["start_item"], pagination["end_item"]) == (45, 45)
