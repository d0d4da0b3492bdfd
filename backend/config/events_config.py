# Static configuration for email notifications: bus topics, settings service
# ids, supported bundle periods and the bundle groups used to present
# notifications inside emails. Loaded once at import time, never mutated.

from enum import Enum

from models.notification import BundleGroupDefinition


# Bus API topics
EMAIL_GENERAL_EVENT = "external.action.email"
EMAIL_BUNDLED_EVENT = "external.action.email.bundled"

# Project notification types
PROJECT_ACTIVE = "connect.notification.project.active"
PROJECT_COMPLETED = "connect.notification.project.completed"
PROJECT_CANCELED = "connect.notification.project.canceled"
PROJECT_PAUSED = "connect.notification.project.paused"
PROJECT_SPECIFICATION_MODIFIED = "connect.notification.project.updated.spec"
PROJECT_PLAN_READY = "connect.notification.project.plan.ready"
PROJECT_PLAN_UPDATED = "connect.notification.project.plan.updated"
PROJECT_PHASE_TRANSITION_ACTIVE = "connect.notification.project.phase.transition.active"
PROJECT_PHASE_TRANSITION_COMPLETED = "connect.notification.project.phase.transition.completed"
MEMBER_JOINED = "connect.notification.project.member.joined"
MEMBER_LEFT = "connect.notification.project.member.left"
MEMBER_REMOVED = "connect.notification.project.member.removed"
MEMBER_ASSIGNED_AS_OWNER = "connect.notification.project.member.assignedAsOwner"
FILE_UPLOADED = "connect.notification.project.fileUploaded"
LINK_CREATED = "connect.notification.project.linkCreated"
TOPIC_CREATED = "connect.notification.project.topic.created"
POST_CREATED = "connect.notification.project.post.created"
POST_MENTION = "connect.notification.project.post.mention"

# Notification settings service ids
SETTINGS_EMAIL_SERVICE_ID = "email"
SETTINGS_EMAIL_BUNDLING_SERVICE_ID = "emailBundling"

# Supported bundle periods mapped to the cron expression that triggers them
SCHEDULED_EVENT_PERIOD = {
    "every10minutes": "*/10 * * * *",
    "hourly": "0 * * * *",
    "daily": "0 7 * * *",
    "weekly": "0 7 * * 6",
}
DEFAULT_BUNDLE_PERIOD = "daily"

BUNDLED_EMAIL_SUBJECT = "Your project updates"
EMAIL_VERSION = "v3"


class BundleGroup(str, Enum):
    """Presentation groups for notifications inside an email."""

    TOPICS_AND_POSTS = "TOPICS_AND_POSTS"
    PROJECT_STATUS = "PROJECT_STATUS"
    PROJECT_PLAN = "PROJECT_PLAN"
    PROJECT_MEMBERS = "PROJECT_MEMBERS"
    PROJECT_FILES = "PROJECT_FILES"
    DEFAULT = "DEFAULT"


# Declaration order matters: the first group containing a type owns it.
# Type sets must stay disjoint.
EVENT_BUNDLES: dict[BundleGroup, BundleGroupDefinition] = {
    BundleGroup.TOPICS_AND_POSTS: BundleGroupDefinition(
        types=frozenset({TOPIC_CREATED, POST_CREATED, POST_MENTION}),
        title="Activity in <topicTitle>",
        subject="<authorHandle> posted in <projectName>",
        group_by="topicId",
    ),
    BundleGroup.PROJECT_STATUS: BundleGroupDefinition(
        types=frozenset(
            {
                PROJECT_ACTIVE,
                PROJECT_COMPLETED,
                PROJECT_CANCELED,
                PROJECT_PAUSED,
                PROJECT_SPECIFICATION_MODIFIED,
            }
        ),
        title="Project status changes",
        subject="Status of <projectName> has changed",
    ),
    BundleGroup.PROJECT_PLAN: BundleGroupDefinition(
        types=frozenset(
            {
                PROJECT_PLAN_READY,
                PROJECT_PLAN_UPDATED,
                PROJECT_PHASE_TRANSITION_ACTIVE,
                PROJECT_PHASE_TRANSITION_COMPLETED,
            }
        ),
        title="Project plan updates",
        subject="Project plan of <projectName> was updated",
    ),
    BundleGroup.PROJECT_MEMBERS: BundleGroupDefinition(
        types=frozenset(
            {MEMBER_JOINED, MEMBER_LEFT, MEMBER_REMOVED, MEMBER_ASSIGNED_AS_OWNER}
        ),
        title="Team changes by <authorHandle>",
        subject="Team of <projectName> has changed",
    ),
    BundleGroup.PROJECT_FILES: BundleGroupDefinition(
        types=frozenset({FILE_UPLOADED, LINK_CREATED}),
        title="Files and links shared by <authorHandle>",
        subject="<authorHandle> shared new files in <projectName>",
        group_by="authorHandle",
    ),
    BundleGroup.DEFAULT: BundleGroupDefinition(
        types=frozenset(),
        title="Other updates",
        subject="New notification for <projectName>",
    ),
}

MESSAGING_EVENT_TYPES = EVENT_BUNDLES[BundleGroup.TOPICS_AND_POSTS].types
