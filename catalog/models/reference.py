# catalog/models/reference.py
# Nationalities, genres and faculties share one shape: an id and a unique name.
from .common import Candidate, MediumName, ShortName, View


class NameCandidate(Candidate):
    name: ShortName


class FacultyCandidate(Candidate):
    name: MediumName


class NamedView(View):
    id: int
    name: str
