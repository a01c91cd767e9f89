from setuptools import setup, find_packages

setup(
    name='tabular-graph-visualizer',
    version='1.0.0',
    description='Projects tabular snapshots into an interactive node-link diagram',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'networkx>=3.0',
        'numpy>=1.24',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'tabular_graph.data_source': [
            'csv = data_source_plugin_csv.plugin:CsvDataSourcePlugin',
            'json = data_source_plugin_json.plugin:JsonDataSourcePlugin',
        ],
        'tabular_graph.layout': [
            'organic = layout_plugin_organic.plugin:OrganicLayoutPlugin',
        ],
    },
    python_requires='>=3.10',
)
