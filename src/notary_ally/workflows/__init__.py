"""Form and workflow state that sits between user input and the collections."""

from .appointments import AppointmentEditor
from .journal import JournalForm
from .mileage import MileageState, MileageWorkflow

__all__ = ["AppointmentEditor", "JournalForm", "MileageState", "MileageWorkflow"]
