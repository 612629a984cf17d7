from setuptools import setup

setup(
	name='bnfvalidator',
	version='0.2',
	description='Validates sentences against rules of a small BNF-like grammar',
	url='http://github.com/fergusq/bnfvalidator',
	author='Iikka Hauhio',
	author_email='iikka.hauhio@gmail.com',
	license='GPL',
	classifiers=[
		'Programming Language :: Python :: 3'
	],
	packages=['bnfvalidator'],
	package_data={'bnfvalidator': ['domolect.bnf']},
	python_requires='>=3.12',
	install_requires=['rich'],
	extras_require={'test': ['pytest']},
)
