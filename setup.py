from setuptools import setup, find_packages

setup(
    name="campusfood",
    version="0.1.0",
    packages=find_packages(include=["campusfood", "campusfood.*", "food_ordering", "food_ordering.*"]),
    include_package_data=True,
    install_requires=[
        "Django>=5.1",
        "djangorestframework>=3.14",
        "django-cors-headers>=4.0",
        "python-dotenv>=1.0",
        "whitenoise>=6.5",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-django>=4.5",
        ],
    },
    description="Campus food ordering API: accounts, menu, cart and checkout on Django REST framework.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Framework :: Django",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License"
    ],
    python_requires='>=3.10',
)
