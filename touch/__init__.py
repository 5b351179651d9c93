"""
Touch Contact Form App

Contact form tied to taxonomy "subjects":
- Public contact form with subject selection and description refresh
- Submissions stored in the "submissions" table
- Email notification routed to the subject's address (or the site address)
- Admin listing, detail, edit and delete of submissions
"""
