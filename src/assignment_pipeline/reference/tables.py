"""
Built-in Reference Tables.

Static district, taluka and seed assignment data used when no reference
file is supplied.
"""

from __future__ import annotations

from typing import List

from assignment_pipeline.domain.entities import Assignment, District, Taluka


# (district_code, district_name)
DISTRICT_ROWS = [
    ("AHM001", "Ahmedabad"),
    ("GAN002", "Gandhinagar"),
    ("BAN007", "Banaskantha"),
    ("PAT008", "Patan"),
    ("SUR009", "Surendranagar"),
]

# (district_code, taluka_code, taluka_name)
TALUKA_ROWS = [
    # Ahmedabad
    ("AHM001", "AHM-T001", "Daskroi"),
    ("AHM001", "AHM-T002", "Sanand"),
    # Gandhinagar
    ("GAN002", "GAN-T001", "Kalol"),
    ("GAN002", "GAN-T002", "Mansa"),
    # Banaskantha
    ("BAN007", "BAN-T001", "Palanpur"),
    ("BAN007", "BAN-T002", "Danta"),
    # Patan
    ("PAT008", "PAT-T001", "Siddhpur"),
    ("PAT008", "PAT-T002", "Harij"),
    # Surendranagar
    ("SUR009", "SUR-T001", "Wadhwan"),
    ("SUR009", "SUR-T002", "Chotila"),
]

# (district_code, district_name, taluka_code, taluka_name, sales_person)
ASSIGNMENT_ROWS = [
    ("AHM001", "Ahmedabad", "AHM-T001", "Daskroi", "Ravi Patel"),
    ("GAN002", "Gandhinagar", "GAN-T001", "Kalol", "Amit Joshi"),
]


def default_districts() -> List[District]:
    return [
        District(district_code=code, district_name=name)
        for code, name in DISTRICT_ROWS
    ]


def default_talukas() -> List[Taluka]:
    return [
        Taluka(district_code=district, taluka_code=code, taluka_name=name)
        for district, code, name in TALUKA_ROWS
    ]


def default_assignments() -> List[Assignment]:
    return [
        Assignment(
            district_code=district_code,
            district_name=district_name,
            taluka_code=taluka_code,
            taluka_name=taluka_name,
            sales_person=sales_person,
        )
        for (
            district_code,
            district_name,
            taluka_code,
            taluka_name,
            sales_person,
        ) in ASSIGNMENT_ROWS
    ]
