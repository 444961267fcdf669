from paginator import OffsetParams, PagePosition, offset_to_page, page_to_offset


def test_page_to_offset():
    assert page_to_offset(3, 20) == OffsetParams(limit=20, offset=40)
    assert page_to_offset(1, 100) == OffsetParams(limit=100, offset=0)
    assert page_to_offset(3, 25) == OffsetParams(limit=25, offset=50)


def test_offset_to_page():
    assert offset_to_page(40, 20) == PagePosition(page=3, page_size=20)
    assert offset_to_page(0, 10) == PagePosition(page=1, page_size=10)


def test_round_trip():
    for page in range(1, 30):
        for page_size in range(1, 30):
            addressing = page_to_offset(page, page_size)
            position = offset_to_page(addressing.offset, addressing.limit)
            assert (position.page, position.page_size) == (page, page_size)


def test_non_aligned_offset_floors_to_enclosing_page():
    assert offset_to_page(45, 20).page == 3
    assert offset_to_page(59, 20).page == 3
    assert offset_to_page(60, 20).page == 4


def test_results_serialize_with_wire_names():
    assert page_to_offset(2, 10).model_dump(by_alias=True) == {"limit": 10, "offset": 10}
    assert offset_to_page(10, 10).model_dump(by_alias=True) == {"page": 2, "pageSize": 10}
