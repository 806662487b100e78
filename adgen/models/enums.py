"""
Enums for database models
"""
import enum


class Platform(str, enum.Enum):
    """Supported advertising platforms"""
    REDDIT = "reddit"
    GOOGLE = "google"
    FACEBOOK = "facebook"


class DataSourceType(str, enum.Enum):
    """Where a data source's rows come from"""
    CSV = "csv"
    API = "api"
    MANUAL = "manual"
    GOOGLE_SHEETS = "google-sheets"


class CampaignSetStatus(str, enum.Enum):
    """Lifecycle of a campaign set"""
    DRAFT = "draft"
    PENDING = "pending"
    SYNCING = "syncing"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    ARCHIVED = "archived"
    ERROR = "error"


class SyncStatus(str, enum.Enum):
    """Platform sync state (campaign sets and sync records)"""
    PENDING = "pending"
    SYNCING = "syncing"
    SYNCED = "synced"
    FAILED = "failed"
    CONFLICT = "conflict"


class CampaignStatus(str, enum.Enum):
    """Generated campaign status"""
    DRAFT = "draft"
    PENDING = "pending"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    ERROR = "error"


class AdGroupStatus(str, enum.Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    REMOVED = "removed"


class AdStatus(str, enum.Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    REMOVED = "removed"


class KeywordStatus(str, enum.Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    REMOVED = "removed"


class KeywordMatchType(str, enum.Enum):
    """Keyword match types"""
    BROAD = "broad"
    PHRASE = "phrase"
    EXACT = "exact"


class BudgetType(str, enum.Enum):
    """Budget types accepted in generation config"""
    DAILY = "daily"
    LIFETIME = "lifetime"
    SHARED = "shared"  # stored as daily
