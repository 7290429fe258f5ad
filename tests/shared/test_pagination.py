from storefront.shared.pagination import MAX_LIMIT, PageRequest, Pagination


class TestPageRequestClamp:
    def test_defaults(self):
        request = PageRequest.clamp(None, None)
        assert request.page == 1
        assert request.limit == 10

    def test_custom_default_limit(self):
        assert PageRequest.clamp(None, None, default_limit=12).limit == 12

    def test_oversized_limit_is_capped(self):
        assert PageRequest.clamp(1, 1000).limit == MAX_LIMIT == 50

    def test_page_zero_becomes_one(self):
        assert PageRequest.clamp(0, 10).page == 1

    def test_negative_values_are_pulled_into_range(self):
        request = PageRequest.clamp(-3, -5)
        assert request.page == 1
        assert request.limit == 1

    def test_offset(self):
        assert PageRequest(page=3, limit=20).offset == 40


class TestPagination:
    def test_middle_page(self):
        pagination = Pagination.build(PageRequest(page=2, limit=10), total=35)
        assert pagination.pages == 4
        assert pagination.has_next is True
        assert pagination.has_prev is True

    def test_last_page(self):
        pagination = Pagination.build(PageRequest(page=4, limit=10), total=35)
        assert pagination.has_next is False

    def test_empty_result(self):
        pagination = Pagination.build(PageRequest(page=1, limit=10), total=0)
        assert pagination.pages == 0
        assert pagination.has_next is False
        assert pagination.has_prev is False

    def test_serializes_camel_case(self):
        data = Pagination.build(PageRequest(page=1, limit=10), total=5).model_dump(by_alias=True)
        assert set(data) == {"page", "limit", "total", "pages", "hasNext", "hasPrev"}
