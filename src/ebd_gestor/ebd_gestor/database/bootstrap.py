from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from .json_store import JsonStore

logger = logging.getLogger(__name__)


def demo_data(today: Optional[date] = None) -> dict[str, list | dict]:
    """Small demo church: four classes, a handful of students, last week's sessions."""
    today = today or date.today()
    last_week = (today - timedelta(days=7)).isoformat()

    return {
        "classes": [
            {"id": "c1", "name": "Jardim de Infância", "ageRange": "4-6 anos", "room": "Sala 1", "mainTeacherId": "t1"},
            {"id": "c2", "name": "Primários", "ageRange": "7-9 anos", "room": "Sala 2", "mainTeacherId": "t2"},
            {"id": "c3", "name": "Jovens", "ageRange": "18-25 anos", "room": "Salão B", "mainTeacherId": "t3"},
            {"id": "c4", "name": "Adultos", "ageRange": "26+ anos", "room": "Nave Principal", "mainTeacherId": "t4"},
        ],
        "teachers": [
            {"id": "t1", "name": "Ana Silva", "classIds": ["c1"], "phone": "(11) 99999-1111", "email": "ana@email.com"},
            {"id": "t2", "name": "Carlos Santos", "classIds": ["c2"], "phone": "(11) 99999-2222"},
            {"id": "t3", "name": "Pr. Marcos", "classIds": ["c3", "c4"], "phone": "(11) 99999-3333"},
            {"id": "t4", "name": "Dra. Cláudia", "classIds": ["c4"], "phone": "(11) 99999-4444"},
        ],
        "students": [
            {"id": "s1", "name": "Lucas Oliveira", "birthDate": "2018-05-10", "classId": "c1", "active": True},
            {"id": "s2", "name": "Sofia Lima", "birthDate": "2019-02-15", "classId": "c1", "active": True},
            {"id": "s3", "name": "Pedro Henrique", "birthDate": "2015-08-20", "classId": "c2", "active": True},
            {"id": "s4", "name": "Mariana Costa", "birthDate": "2016-11-05", "classId": "c2", "active": True},
            {"id": "s5", "name": "João Victor", "birthDate": "2000-01-01", "classId": "c3", "active": True},
            {"id": "s6", "name": "Fernanda Souza", "birthDate": "1985-06-12", "classId": "c4", "active": True},
            {"id": "s7", "name": "Roberto Almeida", "birthDate": "1970-03-30", "classId": "c4", "active": False},
        ],
        "attendance": [
            {
                "id": f"{last_week}-c1",
                "date": last_week,
                "classId": "c1",
                "presentStudentIds": ["s1", "s2"],
                "visitorsCount": 1,
                "biblesCount": 2,
                "magazinesCount": 2,
                "offeringValue": 15.50,
                "notes": "Aula sobre a Arca de Noé",
            },
            {
                "id": f"{last_week}-c4",
                "date": last_week,
                "classId": "c4",
                "presentStudentIds": ["s6"],
                "visitorsCount": 0,
                "biblesCount": 5,
                "magazinesCount": 3,
                "offeringValue": 150.00,
            },
        ],
        "settings": {
            "churchName": "Igreja Exemplo",
            "address": "Rua Exemplo, 100",
            "leadership": {
                "pastorPresidente": "",
                "dirigentes": "",
                "superintendentes": "",
                "secretarios": "",
                "tesoureiro": "",
            },
        },
    }


def ensure_demo_data(store: JsonStore, *, today: Optional[date] = None) -> bool:
    """Write the demo snapshot when the data file does not exist yet."""
    if store.exists():
        return False
    for name, value in demo_data(today).items():
        store.put(name, value)
    logger.info("Demo data written to %s", store.path)
    return True
