import logging

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

import config
from config import SeedConfig
from db import session_commit, session_rollback
from enums.catalog_seed_mode import CatalogSeedMode
from exceptions.seed import CatalogSeedException, CredentialSeedException
from models.item import ItemDTO
from models.user import UserDTO
from repositories.item import ItemRepository
from repositories.user import UserRepository
from utils.catalog_loader import load_catalog
from utils.password import hash_password

logger = logging.getLogger(__name__)


class SeedReport(BaseModel):
    admin_created: bool
    catalog_mode: CatalogSeedMode
    items_seeded: int


class SeedService:

    @staticmethod
    async def seed(session: AsyncSession | Session, seed_config: SeedConfig) -> SeedReport:
        """
        Seed reference data: demo admin first, then the item catalog.

        Both steps commit on their own. A failing catalog refresh leaves an
        already created admin user in place.
        """
        admin_created = await SeedService.seed_admin_user(session, seed_config.dev_seed)
        items_seeded = await SeedService.seed_catalog(session, seed_config)
        return SeedReport(
            admin_created=admin_created,
            catalog_mode=seed_config.catalog_mode,
            items_seeded=items_seeded,
        )

    @staticmethod
    async def seed_admin_user(session: AsyncSession | Session, dev_seed: bool = True) -> bool:
        """
        Create the demo admin user when the users table is empty.

        Args:
            session: Database session
            dev_seed: DEV_SEED switch, no demo credentials are created when False

        Returns:
            True if the admin user was created

        Raises:
            CredentialSeedException: If hashing or the insert fails
        """
        try:
            user_count = await UserRepository.get_all_count(session)
            if user_count > 0:
                return False
            if not dev_seed:
                logger.warning("Users table is empty and DEV_SEED is disabled, no demo user created")
                return False

            password_hash = hash_password(config.DEMO_PASSWORD)
            await UserRepository.create(UserDTO(username=config.DEMO_USERNAME, password=password_hash), session)
            await session_commit(session)
        except (SQLAlchemyError, ValueError, TypeError) as e:
            await session_rollback(session)
            raise CredentialSeedException(config.DEMO_USERNAME, str(e))

        logger.info(f"Demo user created: {config.DEMO_USERNAME} / {config.DEMO_PASSWORD}")
        return True

    @staticmethod
    async def seed_catalog(session: AsyncSession | Session, seed_config: SeedConfig) -> int:
        """
        Publish the catalog file into the items table.

        RESEED deletes every item and inserts the catalog again, so ids change.
        SYNC updates rows matched by name in place, inserts the missing entries
        and deletes every row whose name is not in the catalog. Both modes
        leave exactly the catalog entries in the table.

        Returns:
            Number of catalog entries written

        Raises:
            InvalidCatalogException: If the catalog file is invalid
            CatalogSeedException: If a delete or insert fails
        """
        entries = load_catalog(seed_config.catalog_file)

        step = "delete"
        try:
            if seed_config.catalog_mode == CatalogSeedMode.RESEED:
                await ItemRepository.delete_all(session)
                step = "insert"
                for entry in entries:
                    await ItemRepository.create(entry, session)
            else:
                step = "sync"
                await SeedService._sync_catalog(entries, session)
            await session_commit(session)
        except SQLAlchemyError as e:
            await session_rollback(session)
            raise CatalogSeedException(step, str(e))

        logger.info("TechMart database seeded successfully")
        return len(entries)

    @staticmethod
    async def _sync_catalog(entries: list[ItemDTO], session: AsyncSession | Session) -> None:
        catalog_names = {entry.name for entry in entries}
        ids_by_name: dict[str, int] = {}
        stale_ids = []
        # Lowest id wins when a name occurs more than once
        for item_id, name in await ItemRepository.get_id_name_pairs(session):
            if name in catalog_names and name not in ids_by_name:
                ids_by_name[name] = item_id
            else:
                stale_ids.append(item_id)

        await ItemRepository.delete_by_ids(stale_ids, session)

        created = 0
        for entry in entries:
            item_id = ids_by_name.get(entry.name)
            if item_id is None:
                await ItemRepository.create(entry, session)
                created += 1
            else:
                await ItemRepository.update(entry.model_copy(update={"id": item_id}), session)

        logger.info(f"Catalog sync: {len(ids_by_name)} updated, {created} inserted, {len(stale_ids)} removed")
