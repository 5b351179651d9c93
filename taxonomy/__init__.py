"""
Taxonomy App

Vocabularies and terms shared by the site's content. The contact form
reads its subjects (with their routing email addresses) from here.
"""
