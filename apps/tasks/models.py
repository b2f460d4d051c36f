from django.db import models


class Task(models.Model):
    """
    A single to-do item.
    Stored in the plain `tasks` table; ids come from the database sequence
    and are never reused.
    """
    task_id = models.AutoField(primary_key=True)
    name = models.TextField()
    priority = models.IntegerField(null=True, blank=True)

    class Meta:
        db_table = 'tasks'
        ordering = ['task_id']

    def __str__(self):
        return f"#{self.task_id} {self.name}"
