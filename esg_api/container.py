"""Dependency Injection Container for non-HTTP entry points.

The FastAPI app builds services per request in ``esg_api.dependencies``;
scripts and batch jobs use this container instead.

Usage::

    from esg_api.container import AppContainer

    container = AppContainer()
    container.init_resources()  # create tables, open the session

    report_svc = container.report_service()
    report_svc.generate(company_id=1, year=2024, quarter=2)

    container.shutdown_resources()  # close the session
"""

from dependency_injector import containers, providers

from esg_api.config import Settings
from esg_api.database import build_engine, build_session_factory, init_db
from esg_api.engines.aggregation import ESGAggregator
from esg_api.engines.report_generator import ReportGenerator
from esg_api.repositories.company_repo import CompanyRepository
from esg_api.repositories.emission_repo import EmissionRepository
from esg_api.repositories.energy_repo import EnergyRepository
from esg_api.repositories.report_repo import ReportRepository
from esg_api.repositories.user_repo import UserRepository
from esg_api.services.auth_service import AuthService
from esg_api.services.company_service import CompanyService
from esg_api.services.dashboard_service import DashboardService
from esg_api.services.emission_service import EmissionService
from esg_api.services.energy_service import EnergyService
from esg_api.services.report_service import ReportService


def _init_database(engine):
    init_db(engine)
    return engine


def _open_session(factory, initialized=None):
    """Session resource: opened on init_resources, closed on shutdown."""
    session = factory()
    try:
        yield session
    finally:
        session.close()


class AppContainer(containers.DeclarativeContainer):
    """Wires settings, database, repositories, engines and services."""

    # ══════════════════════════════════════════════════════════════════
    # CONFIGURATION
    # ══════════════════════════════════════════════════════════════════

    settings = providers.Singleton(Settings)

    # ══════════════════════════════════════════════════════════════════
    # DATABASE
    # ══════════════════════════════════════════════════════════════════

    db_engine = providers.Singleton(
        build_engine,
        database_url=settings.provided.database_url,
        echo=False,
    )

    db_initialized = providers.Resource(
        _init_database,
        engine=db_engine,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=db_engine,
    )

    db_session = providers.Resource(
        _open_session,
        factory=session_factory,
        initialized=db_initialized,
    )

    # ══════════════════════════════════════════════════════════════════
    # REPOSITORIES
    # ══════════════════════════════════════════════════════════════════

    company_repo = providers.Factory(CompanyRepository, db=db_session)
    emission_repo = providers.Factory(EmissionRepository, db=db_session)
    energy_repo = providers.Factory(EnergyRepository, db=db_session)
    report_repo = providers.Factory(ReportRepository, db=db_session)
    user_repo = providers.Factory(UserRepository, db=db_session)

    # ══════════════════════════════════════════════════════════════════
    # ENGINES
    # ══════════════════════════════════════════════════════════════════

    aggregator = providers.Singleton(ESGAggregator)
    report_generator = providers.Singleton(ReportGenerator)

    # ══════════════════════════════════════════════════════════════════
    # SERVICES
    # ══════════════════════════════════════════════════════════════════

    company_service = providers.Factory(
        CompanyService,
        db=db_session,
        company_repo=company_repo,
    )

    emission_service = providers.Factory(
        EmissionService,
        db=db_session,
        emission_repo=emission_repo,
        company_repo=company_repo,
    )

    energy_service = providers.Factory(
        EnergyService,
        db=db_session,
        energy_repo=energy_repo,
        company_repo=company_repo,
        aggregator=aggregator,
    )

    report_service = providers.Factory(
        ReportService,
        db=db_session,
        report_repo=report_repo,
        company_repo=company_repo,
        emission_repo=emission_repo,
        energy_repo=energy_repo,
        generator=report_generator,
    )

    dashboard_service = providers.Factory(
        DashboardService,
        company_repo=company_repo,
        emission_repo=emission_repo,
        energy_repo=energy_repo,
        report_repo=report_repo,
        aggregator=aggregator,
        max_ranking_limit=settings.provided.ranking_max_limit,
        max_comparison_companies=settings.provided.comparison_max_companies,
    )

    auth_service = providers.Factory(
        AuthService,
        db=db_session,
        user_repo=user_repo,
        company_repo=company_repo,
        settings=settings,
    )
