"""Pytest configuration for the sqlpaste test suite."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "cli: marks tests that drive the click commands"
    )


@pytest.fixture
def structure_text():
    """SSMS text output of an INFORMATION_SCHEMA.COLUMNS query."""
    return (
        "COLUMN_NAME           DATA_TYPE    CHARACTER_MAXIMUM_LENGTH    IS_NULLABLE\n"
        "PERIODO_CODIGO        varchar      10                          NO\n"
        "PROGRAMA_ID           int          NULL                        NO\n"
        "PROGRAMA_NOMBRE       varchar      200                         YES\n"
        "FECHA_CORTE           varchar      20                          YES\n"
    )


@pytest.fixture
def results_text():
    """SSMS grid copy (tab separated) with headers."""
    return (
        "PERIODO_CODIGO\tPROGRAMA_ID\tPROGRAMA_NOMBRE\tFECHA_CORTE\tVALOR_MATRICULA\n"
        "202110\t15\tIngenieria de Sistemas\t2021-03-01\t4500000.50\n"
        "202110\t16\tDerecho\t2021-03-01\t3900000.00\n"
        "202120\t17\tMedicina\t2021-09-01\t7800000.25\n"
    )
