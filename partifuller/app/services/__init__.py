"""
Service layer.

The validator, record store, RSVP service and view renderer each live
in their own module.  API handlers only talk to :class:`RsvpService`
and :class:`ViewRenderer`.
"""
