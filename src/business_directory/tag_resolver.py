"""
Tag Resolver
Resolves tag relation rows into tag names, for one business or for every business.
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from sqlalchemy.exc import SQLAlchemyError

from src.db.db import get_all_tag_relations, get_tag_relations_for_business, get_tag_names_by_ids
from src.db.db_interface import get_db_session
from src.business_directory.exceptions import TagFetchError
from src.business_directory.schemas import BusinessTag
from src.utils.log import get_logger, log_in_out

logger = get_logger(__name__)


def group_tag_names_by_business(business_tags: Iterable[BusinessTag]) -> Dict[str, List[str]]:
    """Fold (business, tag name) pairs into {business_id: [tag_name, ...]}, keeping pair order."""
    grouped = defaultdict(list)
    for business_tag in business_tags:
        grouped[business_tag.business_id].append(business_tag.tag_name)
    return dict(grouped)


class TagResolver:
    """Reads tag relations and resolves them to tag names with one batched tag lookup per call."""

    def __init__(self, session_factory=get_db_session):
        self.session_factory = session_factory

    def _resolve(self, fetch_relations, *args) -> List[BusinessTag]:
        try:
            with self.session_factory() as session:
                relations = fetch_relations(session, *args)
                tag_names = get_tag_names_by_ids(session, {relation.tag_id for relation in relations})
        except SQLAlchemyError as e:
            logger.error(f"Error fetching tags: {e}")
            raise TagFetchError() from e

        # Relations pointing at a tag that no longer exists are dropped
        resolved = [
            BusinessTag(business_id=relation.business_id, tag_name=tag_names[relation.tag_id])
            for relation in relations
            if relation.tag_id in tag_names
        ]
        dropped = len(relations) - len(resolved)
        if dropped:
            logger.debug(f"Dropped {dropped} tag relations referencing missing tags")
        return resolved

    @log_in_out(logger=logger, is_print_output=False)
    def resolve_all_tags_grouped_by_business(self) -> List[BusinessTag]:
        """Resolve every tag relation to a (business_id, tag_name) pair."""
        return self._resolve(get_all_tag_relations)

    @log_in_out(logger=logger)
    def resolve_tag_names_for_business(self, business_id: str) -> List[str]:
        """Resolve the tag names of one business, in relation order."""
        return [business_tag.tag_name for business_tag in self._resolve(get_tag_relations_for_business, business_id)]
