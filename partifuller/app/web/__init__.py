"""HTML pages: the RSVP form, the guest list and the form submission route."""
