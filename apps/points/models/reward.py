from django.db import models


class Reward(models.Model):
    """Catalog entry that can be bought with points"""
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    cost = models.PositiveIntegerField()  # Price in points
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rewards'
        ordering = ['cost']
        verbose_name = 'Reward'
        verbose_name_plural = 'Rewards'

    def __str__(self):
        return f"{self.title} - {self.cost} points"
