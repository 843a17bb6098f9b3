from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False, verbose_name='商品ID')),
                ('name', models.CharField(max_length=255, verbose_name='商品名称')),
                ('sku', models.CharField(max_length=64, unique=True, verbose_name='SKU')),
                ('price', models.DecimalField(decimal_places=4, default=0, max_digits=12, verbose_name='价格')),
                ('description', models.TextField(blank=True, default='', verbose_name='商品描述')),
                ('short_description', models.TextField(blank=True, default='', verbose_name='商品简述')),
                ('status', models.PositiveSmallIntegerField(choices=[(1, 'Enabled'), (2, 'Disabled')], default=1, verbose_name='商品状态')),
                ('weight', models.DecimalField(blank=True, decimal_places=4, max_digits=12, null=True, verbose_name='重量')),
                ('dimension_package_height', models.DecimalField(blank=True, decimal_places=4, max_digits=12, null=True, verbose_name='包装高度')),
                ('dimension_package_length', models.DecimalField(blank=True, decimal_places=4, max_digits=12, null=True, verbose_name='包装长度')),
                ('dimension_package_width', models.DecimalField(blank=True, decimal_places=4, max_digits=12, null=True, verbose_name='包装宽度')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='创建时间')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='更新时间')),
            ],
            options={
                'verbose_name': '商品',
                'verbose_name_plural': '商品',
                'db_table': 'catalog_product',
                'indexes': [
                    models.Index(fields=['name'], name='idx_product_name'),
                    models.Index(fields=['status'], name='idx_product_status'),
                    models.Index(fields=['created_at'], name='idx_product_created'),
                ],
            },
        ),
    ]
