from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Tuple
import heapq
import itertools
import logging

logger = logging.getLogger(__name__)

NO_TREATMENTS_MESSAGE = "No treatments recorded."

# ---------- ADTs ----------
@dataclass
class Patient:
    id: int
    name: str
    age: int
    contact: str
    medical_history: List[str] = field(default_factory=list)

    def add_medical_record(self, record: str):
        self.medical_history.append(record)

    def __str__(self):
        history = ", ".join(self.medical_history)
        return (f"Patient ID: {self.id}, Name: {self.name}, Age: {self.age}, "
                f"Contact: {self.contact}, Medical History: [{history}]")

@dataclass
class EmergencyPatient:
    patient: Patient  # reference, the registry owns the record
    priority: int     # lower is more critical

    def __str__(self):
        return f"Patient: {self.patient.name} with priority: {self.priority}"

@dataclass
class Doctor:
    id: int
    name: str
    department: str
    schedule: str

    def __str__(self):
        return (f"Doctor ID: {self.id}, Name: {self.name}, "
                f"Department: {self.department}, Schedule: {self.schedule}")

# ---------- Results ----------
class Status(str, Enum):
    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    EMPTY = "EMPTY"

@dataclass(frozen=True)
class Result:
    """Outcome of an operation that may report NotFound or Empty instead of a value."""
    status: Status
    value: Any = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    def __bool__(self):
        return self.ok

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(Status.OK, value)

    @classmethod
    def not_found(cls, message: str) -> "Result":
        return cls(Status.NOT_FOUND, None, message)

    @classmethod
    def empty(cls, message: str) -> "Result":
        return cls(Status.EMPTY, None, message)

# ---------- Data Structures ----------
class PatientRegistry:
    """Ordered patient records. add is O(1), update/remove/find scan from the front."""
    def __init__(self):
        self.records: List[Patient] = []

    def add(self, patient: Patient) -> Patient:
        # no uniqueness check, duplicate ids are the caller's concern
        self.records.append(patient)
        logger.debug("Added patient %s", patient.id)
        return patient

    def _index_of(self, patient_id: int) -> int:
        for i, p in enumerate(self.records):
            if p.id == patient_id:
                return i
        return -1

    def _not_found(self, patient_id: int) -> Result:
        message = f"Patient with ID {patient_id} not found."
        logger.warning(message)
        return Result.not_found(message)

    def find(self, patient_id: int) -> Result:
        idx = self._index_of(patient_id)
        if idx < 0:
            return self._not_found(patient_id)
        return Result.success(self.records[idx])

    def update(self, patient_id: int, new_patient: Patient) -> Result:
        # replaces the first match; new_patient.id may differ from patient_id
        idx = self._index_of(patient_id)
        if idx < 0:
            return self._not_found(patient_id)
        self.records[idx] = new_patient
        logger.debug("Updated patient %s at position %d", patient_id, idx)
        return Result.success(new_patient)

    def remove(self, patient_id: int) -> Result:
        idx = self._index_of(patient_id)
        if idx < 0:
            return self._not_found(patient_id)
        removed = self.records.pop(idx)
        logger.debug("Removed patient %s", patient_id)
        return Result.success(removed)

    def display_all(self) -> Iterator[Patient]:
        for p in self.records:
            yield p

    def is_empty(self):
        return len(self.records) == 0

    def __len__(self):
        return len(self.records)

class EmergencyQueue:
    """Min-heap where lower priority value -> treated sooner."""
    # enqueue/dequeue = O(log n), peek = O(1)
    def __init__(self):
        self.heap: List[Tuple[int, int, EmergencyPatient]] = []
        self._counter = itertools.count()  # tie-breaker, keeps insertion order

    def enqueue(self, patient: Patient, priority: int) -> EmergencyPatient:
        entry = EmergencyPatient(patient=patient, priority=priority)
        heapq.heappush(self.heap, (priority, next(self._counter), entry))
        logger.debug("Enqueued patient %s with priority %d", patient.id, priority)
        return entry

    def _empty(self) -> Result:
        message = "Emergency queue is empty."
        logger.info(message)
        return Result.empty(message)

    def dequeue(self) -> Result:
        if not self.heap:
            return self._empty()
        _, _, entry = heapq.heappop(self.heap)
        logger.debug("Dequeued patient %s", entry.patient.id)
        return Result.success(entry)

    def peek(self) -> Result:
        if not self.heap:
            return self._empty()
        return Result.success(self.heap[0][2])

    def peek_all(self) -> Iterator[EmergencyPatient]:
        # sorted() copies, the heap itself is left alone
        for _, _, entry in sorted(self.heap):
            yield entry

    def is_empty(self):
        return len(self.heap) == 0

    def __len__(self):
        return len(self.heap)

class TreatmentHistory:
    """Append-only stack of treatment notes; the top is the most recent."""
    def __init__(self, empty_message: str = NO_TREATMENTS_MESSAGE):
        self.stack: List[str] = []
        self.empty_message = empty_message

    def add_treatment(self, treatment: str):
        self.stack.append(treatment)

    def last_treatment(self) -> Result:
        if not self.stack:
            logger.info(self.empty_message)
            return Result.empty(self.empty_message)
        return Result.success(self.stack[-1])

    def display_all(self) -> Iterator[str]:
        # most recent first
        for t in reversed(self.stack):
            yield t

    def is_empty(self):
        return len(self.stack) == 0

    def __len__(self):
        return len(self.stack)

class DoctorDirectory:
    """Hash table using Python dict, keyed by doctor id."""
    def __init__(self):
        self.table: Dict[int, Doctor] = {}

    def add_doctor(self, doctor: Doctor) -> Doctor:
        if doctor.id in self.table:
            logger.debug("Replacing doctor %s", doctor.id)
        self.table[doctor.id] = doctor
        return doctor

    def get_doctor(self, doctor_id: int) -> Result:
        doctor = self.table.get(doctor_id)
        if doctor is None:
            message = f"Doctor with ID {doctor_id} not found."
            logger.warning(message)
            return Result.not_found(message)
        return Result.success(doctor)

    def display_all(self) -> Iterator[Doctor]:
        # iteration order is not part of the contract
        for d in self.table.values():
            yield d

    def __contains__(self, doctor_id):
        return doctor_id in self.table

    def __len__(self):
        return len(self.table)
