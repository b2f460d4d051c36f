from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Task',
            fields=[
                ('task_id', models.AutoField(primary_key=True, serialize=False)),
                ('name', models.TextField()),
                ('priority', models.IntegerField(blank=True, null=True)),
            ],
            options={
                'db_table': 'tasks',
                'ordering': ['task_id'],
            },
        ),
    ]
