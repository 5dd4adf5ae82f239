"""Django signals for cache invalidation.

The musician read views are cached per musician. Any write to an invite,
a confirmation, a gig or a musician profile drops the affected entries.
"""

from django.core.cache import cache
from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from gigs.models import Confirmation, Gig, Invite, MusicianProfile


def pending_invites_key(musician_id) -> str:
    return f"musicians:{musician_id}:pending-invites"


def confirmed_gigs_key(musician_id) -> str:
    return f"musicians:{musician_id}:confirmed-gigs"


def invalidate_musician(musician_id) -> None:
    """Drop the musician's cached views now and again once the write commits.

    A reader running while the transaction is open still sees the old rows
    and may cache them again; the second drop clears that copy.
    """
    keys = [pending_invites_key(musician_id), confirmed_gigs_key(musician_id)]
    cache.delete_many(keys)
    transaction.on_commit(lambda: cache.delete_many(keys))


@receiver([post_save, post_delete], sender=Invite)
def invalidate_invite_cache(sender, instance, **kwargs):
    """Invalidate the invited musician's views when an invite changes."""
    invalidate_musician(instance.musician_id)


@receiver([post_save, post_delete], sender=Confirmation)
def invalidate_confirmation_cache(sender, instance, **kwargs):
    """Invalidate the booked musician's views when a confirmation changes."""
    invalidate_musician(instance.musician_id)


@receiver([post_save, post_delete], sender=MusicianProfile)
def invalidate_profile_cache(sender, instance, **kwargs):
    """Travel distances in the pending view depend on the home location."""
    invalidate_musician(instance.musician_id)


@receiver([post_save, post_delete], sender=Gig)
def invalidate_gig_cache(sender, instance, **kwargs):
    """Invalidate every invited musician's views when gig details change."""
    musician_ids = set(
        Invite.objects.filter(gig_id=instance.pk).values_list("musician_id", flat=True)
    )
    for musician_id in musician_ids:
        invalidate_musician(musician_id)
