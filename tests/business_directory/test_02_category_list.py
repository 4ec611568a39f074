#!/usr/bin/env python3
"""
Level 3: Category List Assembler Tests

One listing per business in the category, main image selection and tag attachment.
"""

import pytest
from unittest.mock import Mock
from sqlalchemy.exc import OperationalError

from src.business_directory.category_list import CategoryListAssembler
from src.business_directory.exceptions import StoreFailure, TagFetchError
from src.business_directory.tag_resolver import TagResolver


class TestCategoryListAssembler:
    """list_by_category against the seeded test database."""

    def test_one_record_per_business(self, test_db, seeded_directory):
        assembler = CategoryListAssembler(test_db.get_session, parallel_reads=False)

        listings = assembler.list_by_category("beauty")

        assert sorted(listing.id for listing in listings) == ["b1", "b2"]

    def test_listing_fields(self, test_db, seeded_directory):
        assembler = CategoryListAssembler(test_db.get_session, parallel_reads=False)

        listings = {listing.id: listing for listing in assembler.list_by_category("beauty")}

        assert listings["b1"].name == "Salon X"
        assert listings["b1"].location == "Seoul"
        assert listings["b1"].main_image == "/images/b1/main.jpg"
        assert listings["b1"].tags == ["nails", "hair"]

    def test_business_without_image_or_tags(self, test_db, seeded_directory):
        assembler = CategoryListAssembler(test_db.get_session, parallel_reads=False)

        listings = {listing.id: listing for listing in assembler.list_by_category("beauty")}

        assert listings["b2"].main_image is None
        assert listings["b2"].tags == []

    def test_gallery_images_are_not_main_images(self, test_db, test_session, test_data_factory):
        test_data_factory.create_test_business(test_session, "b1")
        test_data_factory.create_test_image(test_session, "b1", "/images/b1/gallery.jpg", "gallery")
        assembler = CategoryListAssembler(test_db.get_session, parallel_reads=False)

        listings = assembler.list_by_category("beauty")

        assert listings[0].main_image is None

    def test_first_main_image_wins(self, test_db, test_session, test_data_factory):
        test_data_factory.create_test_business(test_session, "b1")
        test_data_factory.create_test_image(test_session, "b1", "/images/b1/first.jpg", "main")
        test_data_factory.create_test_image(test_session, "b1", "/images/b1/second.jpg", "main")
        assembler = CategoryListAssembler(test_db.get_session, parallel_reads=False)

        listings = assembler.list_by_category("beauty")

        assert listings[0].main_image == "/images/b1/first.jpg"

    def test_other_category_tags_do_not_leak(self, test_db, seeded_directory):
        assembler = CategoryListAssembler(test_db.get_session, parallel_reads=False)

        listings = assembler.list_by_category("beauty")

        assert all("yoga" not in listing.tags for listing in listings)

    def test_unknown_category_is_empty(self, test_db, seeded_directory):
        assembler = CategoryListAssembler(test_db.get_session, parallel_reads=False)

        assert assembler.list_by_category("restaurants") == []

    def test_serialises_main_image_alias(self, test_db, seeded_directory):
        assembler = CategoryListAssembler(test_db.get_session, parallel_reads=False)

        listing = next(l for l in assembler.list_by_category("beauty") if l.id == "b1")
        dumped = listing.model_dump(by_alias=True)

        assert dumped == {
            "id": "b1",
            "name": "Salon X",
            "location": "Seoul",
            "mainImage": "/images/b1/main.jpg",
            "tags": ["nails", "hair"],
        }


class TestCategoryListFailures:
    """Any failed lookup aborts the whole listing."""

    def test_tag_failure_aborts_listing(self, test_db, seeded_directory):
        tag_resolver = Mock(spec=TagResolver)
        tag_resolver.resolve_all_tags_grouped_by_business.side_effect = TagFetchError()
        assembler = CategoryListAssembler(test_db.get_session, tag_resolver=tag_resolver, parallel_reads=False)

        with pytest.raises(StoreFailure, match="Failed to fetch businesses with details") as exc_info:
            assembler.list_by_category("beauty")

        assert isinstance(exc_info.value.__cause__, TagFetchError)

    def test_store_failure_aborts_listing(self, mock_session_factory, mock_db_session):
        mock_db_session.query.side_effect = OperationalError("SELECT", {}, Exception("connection lost"))
        assembler = CategoryListAssembler(mock_session_factory, parallel_reads=False)

        with pytest.raises(StoreFailure, match="Failed to fetch businesses with details"):
            assembler.list_by_category("beauty")
