from django import forms

from .models import PLACEHOLDER_IMAGE, Turf

NUMERIC_ERROR = 'Price and capacity must be valid numbers'


def add_feature(features, feature):
    """
    Return a new feature list with `feature` appended.

    Blank values and duplicates are ignored; the input list is not modified.
    """
    feature = (feature or '').strip()
    if not feature or feature in features:
        return list(features)
    return [*features, feature]


def remove_feature(features, feature):
    """Return a new feature list without `feature`."""
    return [f for f in features if f != feature]


def parse_features(raw):
    """Split a comma or newline separated string into a clean feature list."""
    features = []
    for chunk in (raw or '').replace('\n', ',').split(','):
        features = add_feature(features, chunk)
    return features


class TurfForm(forms.ModelForm):
    price = forms.DecimalField(
        min_value=0,
        max_digits=10,
        decimal_places=2,
        label='Price per Hour (₹)',
        error_messages={'invalid': NUMERIC_ERROR},
        widget=forms.NumberInput(attrs={
            'class': 'form-control',
            'placeholder': '1200',
            'step': '50',
        }),
        help_text='Recommended price range: ₹1200 - ₹1500',
    )
    capacity = forms.IntegerField(
        min_value=1,
        label='Capacity (players)',
        error_messages={'invalid': NUMERIC_ERROR},
        widget=forms.NumberInput(attrs={
            'class': 'form-control',
            'placeholder': '20',
        }),
    )
    features_text = forms.CharField(
        required=False,
        label='Features',
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Floodlights, Parking, Changing room',
        }),
        help_text='Separate features with commas',
    )

    class Meta:
        model = Turf
        fields = ['name', 'location', 'description', 'price', 'capacity', 'image']
        widgets = {
            'name': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'Enter turf name',
            }),
            'location': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'Area, Hyderabad',
            }),
            'description': forms.Textarea(attrs={
                'class': 'form-control',
                'rows': 4,
                'placeholder': 'Describe your turf, its facilities, rules, etc.',
            }),
            'image': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'https://…',
            }),
        }
        labels = {
            'name': 'Turf Name',
            'image': 'Image URL',
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['description'].required = True
        self.fields['image'].required = False
        if self.instance.pk and not self.is_bound:
            self.initial['features_text'] = ', '.join(self.instance.features or [])

    def clean_image(self):
        return self.cleaned_data.get('image') or PLACEHOLDER_IMAGE

    def save(self, commit=True, owner=None):
        turf = super().save(commit=False)
        turf.features = parse_features(self.cleaned_data.get('features_text'))
        if owner is not None and turf.owner_id is None:
            turf.owner = owner

        if commit:
            turf.save()
        return turf
