import logging
from datetime import date

from models.store import get_store, new_id

logger = logging.getLogger(__name__)

JOB_TYPES = ("Full-time", "Part-time", "Volunteer")


class JobOpportunity:
    def __init__(self, id, title_ar, title_en, type, location,
                 description_ar, description_en, deadline, posted_date):
        self.id = id
        self.title_ar = title_ar
        self.title_en = title_en
        self.type = type
        self.location = location
        self.description_ar = description_ar
        self.description_en = description_en
        self.deadline = deadline
        self.posted_date = posted_date

    def title_for(self, lang):
        return self.title_ar if lang == "ar" else self.title_en

    def description_for(self, lang):
        return self.description_ar if lang == "ar" else self.description_en

    def to_dict(self):
        return {
            "id": self.id,
            "title_ar": self.title_ar,
            "title_en": self.title_en,
            "type": self.type,
            "location": self.location,
            "description_ar": self.description_ar,
            "description_en": self.description_en,
            "deadline": self.deadline,
            "posted_date": self.posted_date,
        }

    @staticmethod
    def from_dict(data):
        return JobOpportunity(
            id=str(data["id"]),
            title_ar=data.get("title_ar", ""),
            title_en=data.get("title_en", ""),
            type=data.get("type", "Full-time"),
            location=data.get("location", ""),
            description_ar=data.get("description_ar", ""),
            description_en=data.get("description_en", ""),
            deadline=data.get("deadline", "Open"),
            posted_date=data.get("posted_date", ""),
        )

    @staticmethod
    def get_all():
        return list(get_store().jobs)

    @staticmethod
    def create(title_ar="", title_en="", job_type="Full-time"):
        if job_type not in JOB_TYPES:
            raise ValueError(f"Unknown job type: {job_type}")
        job = JobOpportunity(
            id=new_id(),
            title_ar=title_ar,
            title_en=title_en,
            type=job_type,
            location="Taiz",
            description_ar="وصف الوظيفة...",
            description_en="Job Description...",
            deadline="Open",
            posted_date=date.today().isoformat(),
        )
        store = get_store()
        with store.lock:
            store.jobs.append(job)
        logger.info("Posted job %s (%s)", job.id, job_type)
        return job

    @staticmethod
    def delete(job_id):
        store = get_store()
        with store.lock:
            before = len(store.jobs)
            store.jobs = [j for j in store.jobs if j.id != job_id]
            removed = len(store.jobs) < before
        if removed:
            logger.info("Deleted job %s", job_id)
        return removed
